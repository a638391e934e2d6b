"""Plain-text excerpts from rich-text article bodies."""

from __future__ import annotations

from bs4 import BeautifulSoup

from .types import Article

ELLIPSIS = "..."
DEFAULT_WORD_BUDGET = 15


def strip_markup(html: str | None) -> str:
    """Return the text content of ``html`` with tags removed."""
    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    return soup.get_text(separator=" ")


def excerpt(rich_text: str | None, word_budget: int = DEFAULT_WORD_BUDGET) -> str:
    """Summarise rich text to its first ``word_budget`` words.

    Examples:
        >>> excerpt("<p>one two three four</p>", 2)
        'one two...'
        >>> excerpt("")
        ''
    """
    words = strip_markup(rich_text).split()
    if not words:
        return ""
    budget = max(0, word_budget)
    text = " ".join(words[:budget])
    if len(words) > budget:
        text += ELLIPSIS
    return text


def article_excerpt(article: Article, word_budget: int = DEFAULT_WORD_BUDGET) -> str:
    """Prefer the article's own excerpt, falling back to its content."""
    if article.excerpt and article.excerpt.strip():
        return article.excerpt.strip()
    return excerpt(article.content, word_budget)
