"""
Main pipeline orchestration for newsdesk.

This module coordinates the entire workflow:
1. Load articles, categories and tags (content API or local files)
2. Order articles newest first and apply layout filters
3. Partition the article list into pages of display zones
4. Render output files (HTML, Markdown, JSON)

The front page lays out every published article. A category page first
restricts the list to one category (or subcategory), pulls the latest
few articles out into a "latest news" list, and lays out the rest.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .config import AppConfig
from .core.categories import build_tree, find_category, root_categories, subcategories
from .core.layout import laid_out_articles, partition
from .core.references import reference_ids
from .core.types import Article, CategoryView, FrontPage, SiteData
from .fetch.fetcher import load_site_data, load_site_data_from_files
from .input.json_parser import sort_newest_first, with_images_only
from .output.renderer import (
    render_category_html,
    render_category_markdown,
    render_html,
    render_json,
    render_markdown,
)
from .utils.logging import log_event, setup_logging


class CategoryNotFoundError(LookupError):
    """Raised when a category or subcategory slug does not exist."""


@dataclass
class Source:
    """Where the pipeline loads its collections from.

    Either ``posts_path`` (local files) is set, or the content API from
    the fetch config is used.
    """

    posts_path: Path | None = None
    categories_path: Path | None = None
    tags_path: Path | None = None

    @property
    def is_local(self) -> bool:
        return self.posts_path is not None


def prepare_articles(articles: list[Article], cfg: AppConfig) -> list[Article]:
    """Order articles newest first and apply the image filter if enabled."""
    ordered = sort_newest_first(article for article in articles if article.is_published)
    if cfg.layout.require_images:
        ordered = with_images_only(ordered)
    return ordered


def build_front_page(data: SiteData, cfg: AppConfig) -> FrontPage:
    articles = prepare_articles(data.articles, cfg)
    return FrontPage(
        title=cfg.site.title,
        navigation=root_categories(data.categories),
        pages=partition(articles),
        latest=articles[: max(0, cfg.layout.footer_latest)],
        category_tree=build_tree(data.categories),
        categories=list(data.categories),
        tags=list(data.tags),
        errors=list(data.errors),
    )


def filter_by_category(articles: list[Article], category_id: str) -> list[Article]:
    return [article for article in articles if category_id in reference_ids(article.categories)]


def build_category_view(
    data: SiteData,
    category_slug: str,
    subcategory_slug: str | None,
    cfg: AppConfig,
) -> CategoryView:
    """Build the view for a root category or one of its subcategories.

    Raises:
        CategoryNotFoundError: If either slug does not resolve
    """
    category = find_category(data.categories, category_slug)
    if category is None:
        raise CategoryNotFoundError(f"Category not found: {category_slug}")
    subcategory = None
    if subcategory_slug:
        subcategory = find_category(data.categories, subcategory_slug, parent=category)
        if subcategory is None:
            raise CategoryNotFoundError(f"Subcategory not found: {category_slug}/{subcategory_slug}")

    target = subcategory or category
    articles = prepare_articles(filter_by_category(data.articles, target.id), cfg)
    latest_count = max(0, cfg.layout.category_latest)
    latest = articles[:latest_count]
    rest = articles[latest_count:]

    return CategoryView(
        title=cfg.site.title,
        category=category,
        subcategory=subcategory,
        subcategories=subcategories(data.categories, category),
        latest=latest,
        pages=partition(rest),
        categories=list(data.categories),
        tags=list(data.tags),
        errors=list(data.errors),
    )


def load_data(source: Source, cfg: AppConfig) -> SiteData:
    if source.is_local:
        return load_site_data_from_files(source.posts_path, source.categories_path, source.tags_path)
    return load_site_data(cfg.fetch)


def run_pipeline(
    source: Source,
    output_dir: Path,
    cfg: AppConfig,
    category: str | None = None,
    subcategory: str | None = None,
    console: Console | None = None,
) -> Path:
    """Run the complete layout pipeline.

    Args:
        source: Where to load collections from
        output_dir: Directory for output files
        cfg: Application configuration
        category: Optional root category slug to render a category page
        subcategory: Optional subcategory slug under ``category``
        console: Rich console for summary output (creates default if None)

    Returns:
        Path to the main generated file

    Raises:
        CategoryNotFoundError: If a requested category does not exist
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(cfg.logging, output_dir)
    console = console or Console()

    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        source=str(source.posts_path) if source.is_local else "api",
        output=str(output_dir),
        category=category,
        subcategory=subcategory,
    )

    data = load_data(source, cfg)
    for error in data.errors:
        logger.warning(f"Load error: {error}")
    log_event(
        logger,
        "Data loaded",
        event="data_loaded",
        articles=len(data.articles),
        categories=len(data.categories),
        tags=len(data.tags),
        errors=len(data.errors),
    )

    if category:
        view = build_category_view(data, category, subcategory, cfg)
        basename = "-".join(part for part in (category, subcategory) if part)
        output_path = _write_category(view, output_dir, basename, cfg)
    else:
        view = build_front_page(data, cfg)
        output_path = _write_front_page(view, output_dir, cfg.output.basename, cfg)

    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        pages=len(view.pages),
        laid_out=len(laid_out_articles(view.pages)),
        output=str(output_path),
    )
    console.print(f"Pages: {len(view.pages)}  Articles: {len(laid_out_articles(view.pages))}")
    return output_path


def _write_front_page(front_page: FrontPage, output_dir: Path, basename: str, cfg: AppConfig) -> Path:
    fmt = cfg.output.format
    if fmt == "json":
        output_path = output_dir / f"{basename}.json"
        render_json(front_page, output_path)
        return output_path
    if fmt == "markdown":
        output_path = output_dir / f"{basename}.md"
        render_markdown(front_page, output_path, cfg)
        return output_path

    output_path = output_dir / f"{basename}.html"
    render_html(front_page, output_path, cfg)
    if cfg.output.include_markdown:
        render_markdown(front_page, output_dir / f"{basename}.md", cfg)
    if cfg.output.include_json:
        render_json(front_page, output_dir / f"{basename}.json")
    return output_path


def _write_category(view: CategoryView, output_dir: Path, basename: str, cfg: AppConfig) -> Path:
    fmt = cfg.output.format
    if fmt == "json":
        output_path = output_dir / f"{basename}.json"
        render_json(view, output_path)
        return output_path
    if fmt == "markdown":
        output_path = output_dir / f"{basename}.md"
        render_category_markdown(view, output_path, cfg)
        return output_path

    output_path = output_dir / f"{basename}.html"
    render_category_html(view, output_path, cfg)
    if cfg.output.include_markdown:
        render_category_markdown(view, output_dir / f"{basename}.md", cfg)
    if cfg.output.include_json:
        render_json(view, output_dir / f"{basename}.json")
    return output_path
