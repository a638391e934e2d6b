"""
Core domain models and layout logic.

This package contains the data types and the pure transformations that
turn an article list into display zones. Nothing here performs I/O.
"""

from .categories import build_tree, find_category, root_categories, subcategories
from .excerpt import article_excerpt, excerpt
from .images import image_or_placeholder, resolve_image
from .layout import column_block, layout_to_dict, partition
from .references import category_names, resolve_names, tag_names
from .types import (
    Article,
    Category,
    CategoryNode,
    CategoryView,
    ColumnBlock,
    FrontPage,
    NamedRef,
    Page,
    PrimaryBlock,
    Reference,
    SiteData,
    Tag,
    parse_reference,
)

__all__ = [
    "Article",
    "Category",
    "CategoryNode",
    "CategoryView",
    "ColumnBlock",
    "FrontPage",
    "NamedRef",
    "Page",
    "PrimaryBlock",
    "Reference",
    "SiteData",
    "Tag",
    "parse_reference",
    "build_tree",
    "find_category",
    "root_categories",
    "subcategories",
    "excerpt",
    "article_excerpt",
    "resolve_image",
    "image_or_placeholder",
    "partition",
    "column_block",
    "layout_to_dict",
    "resolve_names",
    "category_names",
    "tag_names",
]
