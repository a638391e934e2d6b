"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- FetchConfig: Content API retrieval settings
- LayoutConfig: Layout and presentation settings
- SiteConfig: Site title and header settings
- OutputConfig: Output format settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from typing import Any

import yaml

API_BASE_URL_ENV = "NEWSDESK_API_BASE_URL"


@dataclass
class FetchConfig:
    """Configuration for loading collections from the content API.

    Attributes:
        api_base_url: Base URL of the content API (falls back to NEWSDESK_API_BASE_URL)
        posts_path: Path of the articles collection
        categories_path: Path of the categories collection
        tags_path: Path of the tags collection
        timeout_seconds: HTTP request timeout
        retries: Number of retry attempts after the first failure
        backoff_seconds: Base delay; attempt N waits N * backoff_seconds
        user_agent: HTTP User-Agent header string
        trust_env: Whether to respect system proxy settings
    """

    api_base_url: str | None = None
    posts_path: str = "/posts"
    categories_path: str = "/categories"
    tags_path: str = "/tags"
    timeout_seconds: float = 20.0
    retries: int = 2
    backoff_seconds: float = 1.0
    user_agent: str = "newsdesk/0.1"
    trust_env: bool = True


@dataclass
class LayoutConfig:
    """Configuration for page layout.

    Attributes:
        excerpt_words: Word budget for article excerpts
        placeholder_image: Image URL used when an article has none
        require_images: Only lay out articles that carry image URLs
        footer_latest: Number of latest articles listed in the footer
        category_latest: Number of latest articles pulled out of a category page
    """

    excerpt_words: int = 15
    placeholder_image: str = "https://placehold.co/600x400?text=No+Image"
    require_images: bool = False
    footer_latest: int = 2
    category_latest: int = 4


@dataclass
class SiteConfig:
    """Configuration for site chrome.

    Attributes:
        title: Site name shown in the page header
        date_format: strftime format for the header date
        footer_text: Text shown in the footer
    """

    title: str = "Newsdesk"
    date_format: str = "%A %d %B %Y"
    footer_text: str = ""


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        format: "html", "markdown" or "json"
        include_markdown: Whether to also generate markdown when format is "html"
        include_json: Whether to also dump the layout as JSON
        basename: File name (without extension) of the generated page
    """

    format: str = "html"
    include_markdown: bool = False
    include_json: bool = False
    basename: str = "index"


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the main log file
    """

    level: str = "INFO"
    console: bool = True
    file: bool = True
    format: str = "jsonl"
    filename: str = "run.jsonl"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    fetch: FetchConfig = field(default_factory=FetchConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    site: SiteConfig = field(default_factory=SiteConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _merge_config(AppConfig(), raw)


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data:
            continue
        if isinstance(value, dict) and isinstance(data[key], dict):
            data[key].update({k: v for k, v in value.items() if k in data[key]})
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "fetch": {
            "api_base_url": cfg.fetch.api_base_url,
            "posts_path": cfg.fetch.posts_path,
            "categories_path": cfg.fetch.categories_path,
            "tags_path": cfg.fetch.tags_path,
            "timeout_seconds": cfg.fetch.timeout_seconds,
            "retries": cfg.fetch.retries,
            "backoff_seconds": cfg.fetch.backoff_seconds,
            "user_agent": cfg.fetch.user_agent,
            "trust_env": cfg.fetch.trust_env,
        },
        "layout": {
            "excerpt_words": cfg.layout.excerpt_words,
            "placeholder_image": cfg.layout.placeholder_image,
            "require_images": cfg.layout.require_images,
            "footer_latest": cfg.layout.footer_latest,
            "category_latest": cfg.layout.category_latest,
        },
        "site": {
            "title": cfg.site.title,
            "date_format": cfg.site.date_format,
            "footer_text": cfg.site.footer_text,
        },
        "output": {
            "format": cfg.output.format,
            "include_markdown": cfg.output.include_markdown,
            "include_json": cfg.output.include_json,
            "basename": cfg.output.basename,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        fetch=FetchConfig(**data["fetch"]),
        layout=LayoutConfig(**data["layout"]),
        site=SiteConfig(**data["site"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )


def get_api_base_url(cfg: FetchConfig) -> str | None:
    """Get the API base URL from inline config or environment variable."""
    if cfg.api_base_url:
        return cfg.api_base_url
    return os.getenv(API_BASE_URL_ENV) or None
