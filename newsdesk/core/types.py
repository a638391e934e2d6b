"""
Core data types for newsdesk.

This module defines the structures shared by every stage:
- Article, Category, Tag: normalised content records
- NamedRef / Reference: a category or tag reference, either a bare id or an
  inline object that already carries its name
- PrimaryBlock, ColumnBlock, Page: layout zones produced by the partitioner
- CategoryNode: one root of the two-level category forest
- SiteData, FrontPage, CategoryView: explicit load results and view models
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Union


@dataclass(frozen=True)
class NamedRef:
    """An inline category/tag object embedded in an article payload."""

    id: str | None
    name: str


Reference = Union[str, NamedRef]


def parse_reference(value: Any) -> Reference | None:
    """Normalise a raw payload value into a Reference.

    A mapping with a non-empty ``name`` is an inline object. A mapping
    without one collapses to its identifier and resolves like a bare id.

    Examples:
        >>> parse_reference("abc")
        'abc'
        >>> parse_reference({"_id": "a", "name": "Tech"})
        NamedRef(id='a', name='Tech')
        >>> parse_reference({"_id": "a"})
        'a'
    """
    if isinstance(value, NamedRef):
        return value
    if isinstance(value, str):
        return value or None
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, Mapping):
        ref_id = value.get("_id")
        if ref_id is None:
            ref_id = value.get("id")
        ref_id = str(ref_id) if ref_id is not None else None
        name = value.get("name")
        if name:
            return NamedRef(id=ref_id, name=str(name))
        return ref_id
    return None


@dataclass
class Article:
    """A content item as consumed by the layout.

    Attributes:
        id: Unique identifier from the content API
        slug: URL-safe unique key
        title: Headline
        content: Rich-text (HTML) body
        status: "draft" or "published"; only published items are laid out
        image_urls: Ordered image URLs, possibly empty
        created_at: Creation timestamp, if known
        categories: Category references in source order
        tags: Tag references in source order
        excerpt: Optional pre-computed summary
    """

    id: str
    slug: str
    title: str
    content: str = ""
    status: str = "published"
    image_urls: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    categories: list[Reference] = field(default_factory=list)
    tags: list[Reference] = field(default_factory=list)
    excerpt: str | None = None

    @property
    def is_published(self) -> bool:
        return self.status == "published"


@dataclass
class Category:
    id: str
    name: str
    slug: str = ""
    parent_id: str | None = None


@dataclass
class Tag:
    id: str
    name: str


@dataclass
class PrimaryBlock:
    """Hero, secondary pair, slider and sidebar of the first page.

    The sidebar is a lookahead: its articles are also laid out again by the
    column blocks that follow.
    """

    hero: Article | None = None
    secondary: list[Article] = field(default_factory=list)
    slider: list[Article] = field(default_factory=list)
    sidebar: list[Article] = field(default_factory=list)


@dataclass
class ColumnBlock:
    """Three-column arrangement of up to 11 articles."""

    left_large: Article | None = None
    left_small: list[Article] = field(default_factory=list)
    center_xl: Article | None = None
    center_small: list[Article] = field(default_factory=list)
    right_large: Article | None = None
    right_small: list[Article] = field(default_factory=list)

    def articles(self) -> list[Article]:
        """Return the populated slots in positional order."""
        ordered: list[Article] = []
        for slot in (
            self.left_large,
            self.left_small,
            self.center_xl,
            self.center_small,
            self.right_large,
            self.right_small,
        ):
            if slot is None:
                continue
            if isinstance(slot, list):
                ordered.extend(slot)
            else:
                ordered.append(slot)
        return ordered


@dataclass
class Page:
    number: int
    primary: PrimaryBlock | None = None
    columns: ColumnBlock | None = None


@dataclass
class CategoryNode:
    category: Category
    children: list[Category] = field(default_factory=list)


@dataclass
class SiteData:
    """Result of loading the site's collections.

    A collection that failed to load is an empty list and contributes one
    message to ``errors``.
    """

    articles: list[Article] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class FrontPage:
    title: str
    navigation: list[Category] = field(default_factory=list)
    pages: list[Page] = field(default_factory=list)
    latest: list[Article] = field(default_factory=list)
    category_tree: list[CategoryNode] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


@dataclass
class CategoryView:
    """A single category (or subcategory) page."""

    title: str
    category: Category
    subcategory: Category | None = None
    subcategories: list[Category] = field(default_factory=list)
    latest: list[Article] = field(default_factory=list)
    pages: list[Page] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)
    tags: list[Tag] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
