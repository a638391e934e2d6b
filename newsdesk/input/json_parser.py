"""JSON parser for content API payloads.

The content API is loose about envelope shapes. A collection may arrive as:
- a bare list: ``[{...}, {...}]``
- a data envelope: ``{"data": [...]}``
- a named envelope: ``{"categories": [...]}`` or ``{"tags": [...]}``

Articles use camelCase keys (``createdAt``, ``categoryIds``, ``tagIds``,
``image_urls``) and Mongo-style ``_id`` identifiers.
"""

from __future__ import annotations

from datetime import datetime, timezone
import logging
from typing import Any, Iterable

from ..core.types import Article, Category, Tag, parse_reference

logger = logging.getLogger(__name__)

PUBLISHED = "published"


def unwrap_collection(payload: Any, *keys: str) -> list[Any]:
    """Extract the item list from a collection payload.

    Args:
        payload: Decoded JSON body
        keys: Envelope keys to try after ``data``

    Returns:
        The items, or an empty list for unrecognised shapes
    """
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in ("data", *keys):
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def parse_articles(payload: Any, published_only: bool = True) -> list[Article]:
    """Parse an articles payload into Article objects.

    Items missing a title or slug are skipped with a warning. Drafts are
    dropped unless ``published_only`` is False.
    """
    articles: list[Article] = []
    for item in unwrap_collection(payload, "posts", "articles"):
        if not isinstance(item, dict):
            continue
        article_id = _identifier(item)
        title = item.get("title")
        slug = item.get("slug")
        if not title or not slug:
            logger.warning(f"Skipping article {article_id or 'unknown'}: missing required fields (title or slug)")
            continue

        article = Article(
            id=article_id or slug,
            slug=str(slug),
            title=str(title),
            content=item.get("content") or "",
            status=item.get("status") or "draft",
            image_urls=[url for url in item.get("image_urls") or [] if isinstance(url, str) and url],
            created_at=parse_timestamp(item.get("createdAt")),
            categories=_references(item.get("categoryIds")),
            tags=_references(item.get("tagIds")),
            excerpt=item.get("excerpt") or None,
        )
        if published_only and not article.is_published:
            continue
        articles.append(article)
    return articles


def parse_categories(payload: Any) -> list[Category]:
    categories: list[Category] = []
    for item in unwrap_collection(payload, "categories"):
        if not isinstance(item, dict):
            continue
        category_id = _identifier(item)
        if not category_id or not item.get("name"):
            logger.warning(f"Skipping category {category_id or 'unknown'}: missing id or name")
            continue
        parent_id = item.get("parentId")
        categories.append(
            Category(
                id=category_id,
                name=str(item["name"]),
                slug=str(item.get("slug") or ""),
                parent_id=str(parent_id) if parent_id not in (None, "") else None,
            )
        )
    return categories


def parse_tags(payload: Any) -> list[Tag]:
    tags: list[Tag] = []
    for item in unwrap_collection(payload, "tags"):
        if not isinstance(item, dict):
            continue
        tag_id = _identifier(item)
        if not tag_id or not item.get("name"):
            logger.warning(f"Skipping tag {tag_id or 'unknown'}: missing id or name")
            continue
        tags.append(Tag(id=tag_id, name=str(item["name"])))
    return tags


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 timestamp, treating naive values as UTC.

    Examples:
        >>> parse_timestamp("2026-02-03T11:44:10.702Z")
        datetime.datetime(2026, 2, 3, 11, 44, 10, 702000, tzinfo=datetime.timezone.utc)
    """
    if not value or not isinstance(value, str):
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable timestamp: {value!r}")
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def sort_newest_first(articles: Iterable[Article]) -> list[Article]:
    """Order articles by creation time, newest first.

    Articles without a timestamp go last, keeping their relative order.
    """
    articles = list(articles)
    dated = [article for article in articles if article.created_at is not None]
    undated = [article for article in articles if article.created_at is None]
    dated.sort(key=lambda article: _aware(article.created_at), reverse=True)
    return dated + undated


def with_images_only(articles: Iterable[Article]) -> list[Article]:
    return [article for article in articles if article.image_urls]


def _aware(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def _identifier(item: dict[str, Any]) -> str | None:
    value = item.get("_id")
    if value is None:
        value = item.get("id")
    return str(value) if value is not None else None


def _references(values: Any) -> list:
    if not isinstance(values, list):
        return []
    refs = []
    for value in values:
        ref = parse_reference(value)
        if ref is not None:
            refs.append(ref)
    return refs
