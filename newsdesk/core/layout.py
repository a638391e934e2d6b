"""
Front page layout partitioning.

Turns an ordered list of published articles into pages of display zones:

    page 1:  hero | secondary pair | slider | sidebar (peek) | column block
    page 2+: column block

Articles are consumed left to right and never reused between the hero,
secondary, slider and column zones. The sidebar is a view over the next
articles after the slider; it does not advance the cursor, so the same
articles open the first column block.
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any, Sequence

from .types import Article, ColumnBlock, Page, PrimaryBlock

HERO_SIZE = 1
SECONDARY_SIZE = 2
SLIDER_SIZE = 4
SIDEBAR_SIZE = 4
COLUMN_BLOCK_SIZE = 11

PRIMARY_SIZE = HERO_SIZE + SECONDARY_SIZE
COLUMNS_START = PRIMARY_SIZE + SLIDER_SIZE


def column_block(window: Sequence[Article]) -> ColumnBlock:
    """Lay out up to 11 articles across three columns.

    Positions: 0 left-large, 1-3 left-small, 4 center-xl, 5-6 center-small,
    7 right-large, 8-10 right-small. Positions past the end stay empty.
    """
    window = list(window[:COLUMN_BLOCK_SIZE])
    return ColumnBlock(
        left_large=_at(window, 0),
        left_small=window[1:4],
        center_xl=_at(window, 4),
        center_small=window[5:7],
        right_large=_at(window, 7),
        right_small=window[8:11],
    )


def primary_block(articles: Sequence[Article]) -> PrimaryBlock:
    return PrimaryBlock(
        hero=_at(articles, 0),
        secondary=list(articles[HERO_SIZE:PRIMARY_SIZE]),
        slider=list(articles[PRIMARY_SIZE:COLUMNS_START]),
        sidebar=list(articles[COLUMNS_START:COLUMNS_START + SIDEBAR_SIZE]),
    )


def partition(articles: Sequence[Article]) -> list[Page]:
    """Partition an ordered article list into pages.

    Args:
        articles: Published articles in display order. Ordering and
            filtering are the caller's job.

    Returns:
        Pages in order. An empty input yields no pages. The first page
        holds the primary block and the first column block (if any
        articles remain after the slider); each later page holds one
        column block of up to 11 articles.
    """
    articles = list(articles)
    if not articles:
        return []

    first = Page(number=1, primary=primary_block(articles))
    pages = [first]

    windows = [
        articles[start:start + COLUMN_BLOCK_SIZE]
        for start in range(COLUMNS_START, len(articles), COLUMN_BLOCK_SIZE)
    ]
    for index, window in enumerate(windows):
        block = column_block(window)
        if index == 0:
            first.columns = block
        else:
            pages.append(Page(number=len(pages) + 1, columns=block))
    return pages


def laid_out_articles(pages: Sequence[Page]) -> list[Article]:
    """Return every article placed in a consuming zone, in cursor order.

    The sidebar is excluded because it only previews upcoming articles.
    """
    ordered: list[Article] = []
    for page in pages:
        if page.primary is not None:
            if page.primary.hero is not None:
                ordered.append(page.primary.hero)
            ordered.extend(page.primary.secondary)
            ordered.extend(page.primary.slider)
        if page.columns is not None:
            ordered.extend(page.columns.articles())
    return ordered


def layout_to_dict(pages: Sequence[Page]) -> list[dict[str, Any]]:
    """Convert pages into plain dicts suitable for JSON output."""
    return [to_plain(asdict(page)) for page in pages]


def to_plain(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return value


def _at(items: Sequence[Article], index: int) -> Article | None:
    return items[index] if index < len(items) else None
