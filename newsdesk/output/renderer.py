"""
Page rendering for HTML, Markdown and JSON output.

This module paints the partitioner's pages. HTML goes through Jinja2
templates; Markdown is assembled line by line; JSON is a plain dump of
the view model. Per-article details (image, excerpt, category and tag
names) are resolved here while walking the zones.
"""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
import json
from pathlib import Path
from typing import Any, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ..config import AppConfig
from ..core.excerpt import article_excerpt
from ..core.images import image_or_placeholder
from ..core.layout import to_plain
from ..core.references import category_names, tag_names
from ..core.types import Article, Category, CategoryView, ColumnBlock, FrontPage, Page, Tag


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
        autoescape=select_autoescape(["html"]),
    )


def article_card(
    article: Article,
    categories: Sequence[Category],
    tags: Sequence[Tag],
    cfg: AppConfig,
) -> dict[str, Any]:
    """Resolve everything a template needs to show one article."""
    return {
        "id": article.id,
        "title": article.title,
        "url": f"/{article.slug}",
        "image": image_or_placeholder(article, cfg.layout.placeholder_image),
        "excerpt": article_excerpt(article, cfg.layout.excerpt_words),
        "categories": category_names(article, categories),
        "tags": tag_names(article, tags),
        "created_at": article.created_at.strftime("%Y-%m-%d") if article.created_at else "",
    }


def page_context(
    pages: Sequence[Page],
    categories: Sequence[Category],
    tags: Sequence[Tag],
    cfg: AppConfig,
) -> list[dict[str, Any]]:
    """Turn pages into nested dicts of article cards."""

    def card(article: Article | None) -> dict[str, Any] | None:
        if article is None:
            return None
        return article_card(article, categories, tags, cfg)

    def cards(articles: Sequence[Article]) -> list[dict[str, Any]]:
        return [article_card(article, categories, tags, cfg) for article in articles]

    def columns(block: ColumnBlock | None) -> dict[str, Any] | None:
        if block is None:
            return None
        return {
            "left_large": card(block.left_large),
            "left_small": cards(block.left_small),
            "center_xl": card(block.center_xl),
            "center_small": cards(block.center_small),
            "right_large": card(block.right_large),
            "right_small": cards(block.right_small),
        }

    rendered = []
    for page in pages:
        primary = None
        if page.primary is not None:
            primary = {
                "hero": card(page.primary.hero),
                "secondary": cards(page.primary.secondary),
                "slider": cards(page.primary.slider),
                "sidebar": cards(page.primary.sidebar),
            }
        rendered.append({"number": page.number, "primary": primary, "columns": columns(page.columns)})
    return rendered


def render_html(front_page: FrontPage, output_path: Path, cfg: AppConfig) -> None:
    """Render the front page as HTML using the Jinja2 template.

    Args:
        front_page: View model built by the runner
        output_path: Path where the HTML file will be written
        cfg: Application configuration (site chrome and layout settings)
    """
    template = _environment().get_template("front_page.html")
    html = template.render(
        title=front_page.title,
        date=datetime.now().strftime(cfg.site.date_format),
        navigation=front_page.navigation,
        pages=page_context(front_page.pages, front_page.categories, front_page.tags, cfg),
        latest=[
            article_card(article, front_page.categories, front_page.tags, cfg)
            for article in front_page.latest
        ],
        category_tree=front_page.category_tree,
        footer_text=cfg.site.footer_text,
        errors=front_page.errors,
    )
    output_path.write_text(html, encoding="utf-8")


def render_category_html(view: CategoryView, output_path: Path, cfg: AppConfig) -> None:
    """Render a category page as HTML using the Jinja2 template."""
    template = _environment().get_template("category_page.html")
    html = template.render(
        title=view.title,
        date=datetime.now().strftime(cfg.site.date_format),
        category=view.category,
        subcategory=view.subcategory,
        subcategories=view.subcategories,
        pages=page_context(view.pages, view.categories, view.tags, cfg),
        latest=[article_card(article, view.categories, view.tags, cfg) for article in view.latest],
        footer_text=cfg.site.footer_text,
        errors=view.errors,
    )
    output_path.write_text(html, encoding="utf-8")


def render_markdown(front_page: FrontPage, output_path: Path, cfg: AppConfig) -> None:
    """Render the front page as Markdown.

    Zones become headings; each article is a heading with its link,
    names and excerpt.
    """
    lines = [f"# {front_page.title}", ""]
    if front_page.navigation:
        lines.append(" | ".join(category.name for category in front_page.navigation))
        lines.append("")
    if front_page.errors and not front_page.pages:
        lines.extend(f"> {error}" for error in front_page.errors)
        lines.append("")
    lines.extend(_markdown_pages(front_page.pages, front_page.categories, front_page.tags, cfg))
    if front_page.latest:
        lines.append("## Latest")
        lines.append("")
        for article in front_page.latest:
            lines.append(f"- [{article.title}](/{article.slug})")
        lines.append("")
    output_path.write_text("\n".join(lines), encoding="utf-8")


def render_category_markdown(view: CategoryView, output_path: Path, cfg: AppConfig) -> None:
    heading = view.category.name
    if view.subcategory is not None:
        heading = f"{heading} / {view.subcategory.name}"
    lines = [f"# {heading}", ""]
    if view.subcategories:
        lines.append(" | ".join(category.name for category in view.subcategories))
        lines.append("")
    if view.latest:
        lines.append("## Latest news")
        lines.append("")
        for article in view.latest:
            lines.append(f"- [{article.title}](/{article.slug})")
        lines.append("")
    lines.extend(_markdown_pages(view.pages, view.categories, view.tags, cfg))
    output_path.write_text("\n".join(lines), encoding="utf-8")


def render_json(view: FrontPage | CategoryView, output_path: Path) -> None:
    payload = to_plain(asdict(view))
    output_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _markdown_pages(
    pages: Sequence[Page],
    categories: Sequence[Category],
    tags: Sequence[Tag],
    cfg: AppConfig,
) -> list[str]:
    lines: list[str] = []
    for page in pages:
        lines.append(f"## Page {page.number}")
        lines.append("")
        zones: list[tuple[str, list[Article]]] = []
        if page.primary is not None:
            zones.extend(
                [
                    ("Top story", [page.primary.hero] if page.primary.hero else []),
                    ("Secondary", page.primary.secondary),
                    ("Slider", page.primary.slider),
                    ("Recent stories", page.primary.sidebar),
                ]
            )
        if page.columns is not None:
            zones.append(("More stories", page.columns.articles()))
        for label, articles in zones:
            if not articles:
                continue
            lines.append(f"### {label}")
            lines.append("")
            for article in articles:
                lines.extend(_markdown_article(article, categories, tags, cfg))
    return lines


def _markdown_article(
    article: Article,
    categories: Sequence[Category],
    tags: Sequence[Tag],
    cfg: AppConfig,
) -> list[str]:
    card = article_card(article, categories, tags, cfg)
    lines = [f"#### [{card['title']}]({card['url']})"]
    labels = card["categories"] + [f"#{name}" for name in card["tags"]]
    if labels:
        lines.append(f"- {', '.join(labels)}")
    if card["excerpt"]:
        lines.append(f"- {card['excerpt']}")
    lines.append("")
    return lines
