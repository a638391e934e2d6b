"""Tests for excerpt extraction and image resolution."""

from newsdesk.core.excerpt import article_excerpt, excerpt, strip_markup
from newsdesk.core.images import first_content_image, image_or_placeholder, resolve_image
from newsdesk.core.types import Article


def _article(**kwargs) -> Article:
    return Article(id="a1", slug="a1", title="A1", **kwargs)


def test_excerpt_truncates_with_ellipsis():
    assert excerpt("<p>one two three four</p>", 2) == "one two..."


def test_excerpt_empty_input():
    assert excerpt("") == ""
    assert excerpt(None) == ""
    assert excerpt("<p>   </p>") == ""


def test_excerpt_without_truncation_has_no_ellipsis():
    assert excerpt("<p>one two</p>", 2) == "one two"
    assert excerpt("<p>one   two\n three</p>") == "one two three"


def test_excerpt_default_budget_is_fifteen_words():
    words = " ".join(f"w{i}" for i in range(20))
    result = excerpt(f"<div>{words}</div>")

    assert result.endswith("...")
    assert len(result[:-3].split()) == 15


def test_strip_markup_drops_scripts_and_separates_blocks():
    text = strip_markup("<p>Hello</p><script>alert(1)</script><p>world</p>")

    assert text.split() == ["Hello", "world"]


def test_article_excerpt_prefers_precomputed():
    article = _article(content="<p>body text here</p>", excerpt="  Custom summary ")

    assert article_excerpt(article) == "Custom summary"
    assert article_excerpt(_article(content="<p>body text here</p>"), 2) == "body text..."


def test_image_prefers_image_urls():
    article = _article(
        image_urls=["https://cdn.example.com/a.jpg", "https://cdn.example.com/b.jpg"],
        content='<img src="https://cdn.example.com/inline.jpg">',
    )

    assert resolve_image(article) == "https://cdn.example.com/a.jpg"


def test_image_falls_back_to_first_content_image():
    article = _article(
        content='<p>x</p><IMG class="wide" SRC=\'https://cdn.example.com/first.png\'><img src="https://cdn.example.com/second.png">'
    )

    assert resolve_image(article) == "https://cdn.example.com/first.png"


def test_image_missing_returns_none_and_placeholder_is_caller_choice():
    article = _article(content="<p>No pictures <img alt='broken'></p>")

    assert resolve_image(article) is None
    assert first_content_image(None) is None
    assert image_or_placeholder(article, "https://placehold.co/1") == "https://placehold.co/1"
