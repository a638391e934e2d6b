"""
Category and tag reference resolution.

Articles reference categories and tags either by bare identifier or by an
inline object that already carries a name. Resolution turns both shapes
into display names, in source order, dropping anything unknown.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from .types import Article, Category, NamedRef, Tag, parse_reference


def resolve_names(
    references: Iterable[Any],
    lookup: Sequence[Any],
    key_field: str = "id",
) -> list[str]:
    """Resolve references to display names.

    Args:
        references: Bare ids, NamedRef objects, or raw payload values
            (normalised through ``parse_reference``)
        lookup: Records (dataclasses or raw mappings) carrying ``key_field``
            and ``name``
        key_field: Field of the lookup records that ids are matched on

    Returns:
        Names in reference order. Unknown ids are dropped; duplicate
        references produce duplicate names.
    """
    index: dict[str, str] = {}
    for record in lookup or []:
        key = _field(record, key_field)
        # first match wins, as with a linear search
        if key is None or str(key) in index:
            continue
        name = _field(record, "name")
        index[str(key)] = str(name) if name else ""

    names: list[str] = []
    for raw in references or []:
        ref = parse_reference(raw)
        if ref is None:
            continue
        if isinstance(ref, NamedRef):
            names.append(ref.name)
            continue
        name = index.get(ref)
        if name:
            names.append(name)
    return names


def category_names(article: Article, categories: Sequence[Category]) -> list[str]:
    return resolve_names(article.categories, categories)


def tag_names(article: Article, tags: Sequence[Tag]) -> list[str]:
    return resolve_names(article.tags, tags)


def reference_ids(references: Iterable[Any]) -> list[str]:
    """Return the identifiers carried by references, skipping id-less ones."""
    ids: list[str] = []
    for raw in references or []:
        ref = parse_reference(raw)
        if isinstance(ref, NamedRef):
            if ref.id:
                ids.append(ref.id)
        elif ref:
            ids.append(ref)
    return ids


def _field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)
