"""
Input parsing utilities.

This package contains code for normalising content API payloads.
"""

from .json_parser import (
    parse_articles,
    parse_categories,
    parse_tags,
    sort_newest_first,
    unwrap_collection,
    with_images_only,
)

__all__ = [
    "parse_articles",
    "parse_categories",
    "parse_tags",
    "sort_newest_first",
    "unwrap_collection",
    "with_images_only",
]
