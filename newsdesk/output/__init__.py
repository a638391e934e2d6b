"""Output rendering for front and category pages."""

from .renderer import (
    render_category_html,
    render_category_markdown,
    render_html,
    render_json,
    render_markdown,
)

__all__ = [
    "render_html",
    "render_category_html",
    "render_markdown",
    "render_category_markdown",
    "render_json",
]
