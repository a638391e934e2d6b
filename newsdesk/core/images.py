"""Representative image selection for articles."""

from __future__ import annotations

import re

from .types import Article

_IMG_SRC_RE = re.compile(r"""<img[^>]+src=["']([^"'>]+)["']""", re.IGNORECASE)


def first_content_image(html: str | None) -> str | None:
    """Return the src of the first <img> tag in ``html``, if any."""
    if not html:
        return None
    match = _IMG_SRC_RE.search(html)
    return match.group(1) if match else None


def resolve_image(article: Article) -> str | None:
    """Pick the display image URL for an article.

    Prefers the first entry of ``image_urls``, then the first image embedded
    in the content. Returns None when neither exists; callers decide on a
    placeholder.
    """
    if article.image_urls:
        return article.image_urls[0]
    return first_content_image(article.content)


def image_or_placeholder(article: Article, placeholder: str) -> str:
    return resolve_image(article) or placeholder
