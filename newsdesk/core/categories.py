"""
Two-level category forest for navigation and footer menus.

Categories form at most two levels: roots (no parent) and their direct
children. Anything nested deeper only shows up under a root whose id it
names as its parent.
"""

from __future__ import annotations

from typing import Sequence

from .types import Category, CategoryNode


def is_root(category: Category) -> bool:
    return not category.parent_id


def root_categories(categories: Sequence[Category]) -> list[Category]:
    return [category for category in categories if is_root(category)]


def subcategories(categories: Sequence[Category], parent: Category) -> list[Category]:
    return [category for category in categories if category.parent_id == parent.id]


def build_tree(categories: Sequence[Category]) -> list[CategoryNode]:
    """Group categories into roots with their direct children.

    Both roots and children keep their source order.
    """
    children_by_parent: dict[str, list[Category]] = {}
    for category in categories:
        if is_root(category):
            continue
        children_by_parent.setdefault(category.parent_id, []).append(category)

    return [
        CategoryNode(category=root, children=list(children_by_parent.get(root.id, [])))
        for root in root_categories(categories)
    ]


def find_category(
    categories: Sequence[Category],
    slug: str,
    parent: Category | None = None,
) -> Category | None:
    """Find a category by slug.

    Without ``parent`` only roots match; with it only that root's
    direct children do.
    """
    for category in categories:
        if category.slug != slug:
            continue
        if parent is None and is_root(category):
            return category
        if parent is not None and category.parent_id == parent.id:
            return category
    return None
