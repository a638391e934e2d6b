"""Tests for category/tag reference resolution."""

from newsdesk.core.references import category_names, reference_ids, resolve_names, tag_names
from newsdesk.core.types import Article, Category, NamedRef, Tag, parse_reference


def test_id_only_object_resolves_through_lookup():
    """An inline object without a name resolves by its id."""
    lookup = [Category(id="a", name="Tech")]

    assert resolve_names([{"_id": "a"}], lookup) == ["Tech"]


def test_unknown_id_is_dropped():
    assert resolve_names(["x"], []) == []


def test_inline_object_uses_its_own_name():
    """Embedded names win even when the id is unknown."""
    refs = [NamedRef(id="zz", name="Inline"), {"_id": "yy", "name": "Raw inline"}]

    assert resolve_names(refs, []) == ["Inline", "Raw inline"]


def test_order_preserved_and_duplicates_kept():
    lookup = [Category(id="1", name="World"), Category(id="2", name="Sport")]

    assert resolve_names(["2", "missing", "1", "2"], lookup) == ["Sport", "World", "Sport"]


def test_custom_key_field():
    lookup = [Category(id="1", name="World", slug="world")]

    assert resolve_names(["world"], lookup, key_field="slug") == ["World"]


def test_parse_reference_shapes():
    assert parse_reference("abc") == "abc"
    assert parse_reference(7) == "7"
    assert parse_reference({"id": "t1"}) == "t1"
    assert parse_reference({"_id": "c1", "name": "Tech"}) == NamedRef(id="c1", name="Tech")
    assert parse_reference("") is None
    assert parse_reference(None) is None
    assert parse_reference({}) is None


def test_article_helpers_use_matching_tables():
    article = Article(
        id="p1",
        slug="p1",
        title="P1",
        categories=["c1", NamedRef(id="c9", name="Inline")],
        tags=["t1", "t2"],
    )
    categories = [Category(id="c1", name="Politics")]
    tags = [Tag(id="t2", name="Elections")]

    assert category_names(article, categories) == ["Politics", "Inline"]
    assert tag_names(article, tags) == ["Elections"]


def test_reference_ids_skip_nameless_inline_without_id():
    refs = ["c1", NamedRef(id="c2", name="B"), NamedRef(id=None, name="C")]

    assert reference_ids(refs) == ["c1", "c2"]


def test_mapping_lookup_table_with_custom_key_field():
    """Raw API records resolve the same way as parsed ones."""
    lookup = [{"_id": "a", "name": "Tech"}, {"_id": "a", "name": "Shadowed"}]

    assert resolve_names([{"_id": "a"}], lookup, "_id") == ["Tech"]
    assert resolve_names(["a", "b"], lookup, key_field="_id") == ["Tech"]
    assert resolve_names(["a"], [{"id": "a", "name": "Tech"}]) == ["Tech"]


def test_parse_reference_keeps_falsy_underscore_id():
    assert parse_reference({"_id": 0, "id": "other"}) == "0"
    assert parse_reference({"_id": 0, "id": "other", "name": "Zero"}) == NamedRef(id="0", name="Zero")
