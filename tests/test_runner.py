"""Tests for pipeline orchestration and the CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from newsdesk.cli import app
from newsdesk.config import AppConfig
from newsdesk.core.types import Article, Category, NamedRef, SiteData
from newsdesk.input.json_parser import parse_articles
from newsdesk.runner import (
    CategoryNotFoundError,
    Source,
    build_category_view,
    build_front_page,
    run_pipeline,
)


def _post(index: int, day: int, categories=None, status="published", images=True) -> dict:
    return {
        "_id": f"p{index}",
        "slug": f"post-{index}",
        "title": f"Post {index}",
        "content": f"<p>Post {index} body</p>",
        "status": status,
        "image_urls": [f"https://cdn.example.com/{index}.jpg"] if images else [],
        "createdAt": f"2026-03-{day:02d}T08:00:00Z",
        "categoryIds": categories if categories is not None else ["c1"],
        "tagIds": [],
    }


def _categories() -> list[Category]:
    return [
        Category(id="c1", name="World", slug="world"),
        Category(id="c2", name="Europe", slug="europe", parent_id="c1"),
        Category(id="c3", name="Sport", slug="sport"),
    ]


def _write_inputs(tmp_path: Path, posts: list[dict]) -> tuple[Path, Path]:
    posts_path = tmp_path / "posts.json"
    posts_path.write_text(json.dumps({"data": posts}), encoding="utf-8")
    categories_path = tmp_path / "categories.json"
    categories_path.write_text(
        json.dumps(
            [
                {"_id": "c1", "name": "World", "slug": "world", "parentId": None},
                {"_id": "c2", "name": "Europe", "slug": "europe", "parentId": "c1"},
            ]
        ),
        encoding="utf-8",
    )
    return posts_path, categories_path


def _quiet_config() -> AppConfig:
    cfg = AppConfig()
    cfg.logging.console = False
    return cfg


def test_front_page_orders_newest_first():
    posts = [_post(1, 1), _post(2, 3), _post(3, 2)]
    data = SiteData(articles=parse_articles(posts), categories=_categories())
    front = build_front_page(data, AppConfig())

    primary = front.pages[0].primary
    assert primary.hero.id == "p2"
    assert [a.id for a in primary.secondary] == ["p3", "p1"]
    assert [a.id for a in front.latest] == ["p2", "p3"]
    assert [c.id for c in front.navigation] == ["c1", "c3"]
    assert [node.category.id for node in front.category_tree] == ["c1", "c3"]


def test_front_page_can_require_images():
    posts = [_post(1, 2, images=False), _post(2, 1)]
    cfg = AppConfig()
    cfg.layout.require_images = True
    front = build_front_page(SiteData(articles=parse_articles(posts)), cfg)

    assert front.pages[0].primary.hero.id == "p2"
    assert front.pages[0].primary.secondary == []


def test_front_page_ignores_drafts_passed_in_directly():
    articles = [
        Article(id="d", slug="d", title="Draft", status="draft"),
        Article(id="p", slug="p", title="Published"),
    ]
    front = build_front_page(SiteData(articles=articles), AppConfig())

    assert front.pages[0].primary.hero.id == "p"
    assert front.pages[0].primary.secondary == []


def test_category_view_splits_latest_from_rest():
    posts = [_post(i, i) for i in range(1, 10)]
    posts.append(_post(99, 28, categories=["c3"]))
    data = SiteData(articles=parse_articles(posts), categories=_categories())

    view = build_category_view(data, "world", None, AppConfig())

    assert [a.id for a in view.latest] == ["p9", "p8", "p7", "p6"]
    assert view.pages[0].primary.hero.id == "p5"
    assert [a.id for a in view.pages[0].primary.secondary] == ["p4", "p3"]
    assert [a.id for a in view.pages[0].primary.slider] == ["p2", "p1"]
    assert [c.id for c in view.subcategories] == ["c2"]


def test_category_view_for_subcategory_matches_inline_references():
    posts = [
        _post(1, 1, categories=[{"_id": "c2", "name": "Europe"}]),
        _post(2, 2, categories=["c1"]),
    ]
    data = SiteData(articles=parse_articles(posts), categories=_categories())
    cfg = AppConfig()
    cfg.layout.category_latest = 0

    view = build_category_view(data, "world", "europe", cfg)

    assert view.subcategory.id == "c2"
    assert view.latest == []
    assert view.pages[0].primary.hero.id == "p1"
    assert view.pages[0].primary.hero.categories == [NamedRef(id="c2", name="Europe")]


def test_category_view_unknown_slugs_raise():
    data = SiteData(categories=_categories())

    with pytest.raises(CategoryNotFoundError):
        build_category_view(data, "nope", None, AppConfig())
    with pytest.raises(CategoryNotFoundError):
        build_category_view(data, "world", "sport", AppConfig())
    with pytest.raises(CategoryNotFoundError):
        build_category_view(data, "europe", None, AppConfig())


def test_run_pipeline_writes_outputs_and_log(tmp_path: Path):
    posts_path, categories_path = _write_inputs(tmp_path, [_post(i, i) for i in range(1, 22)])
    cfg = _quiet_config()
    cfg.output.include_markdown = True
    cfg.output.include_json = True
    output_dir = tmp_path / "out"

    output_path = run_pipeline(Source(posts_path=posts_path, categories_path=categories_path), output_dir, cfg)

    assert output_path == output_dir / "index.html"
    assert output_path.exists()
    assert (output_dir / "index.md").exists()
    payload = json.loads((output_dir / "index.json").read_text(encoding="utf-8"))
    assert len(payload["pages"]) == 2

    events = [json.loads(line) for line in (output_dir / "run.jsonl").read_text(encoding="utf-8").splitlines()]
    assert [e.get("event") for e in events if e.get("event")] == [
        "pipeline_start",
        "data_loaded",
        "pipeline_complete",
    ]
    assert events[-1]["laid_out"] == 21


def test_run_pipeline_category_json(tmp_path: Path):
    posts_path, categories_path = _write_inputs(tmp_path, [_post(i, i) for i in range(1, 6)])
    cfg = _quiet_config()
    cfg.output.format = "json"

    output_path = run_pipeline(
        Source(posts_path=posts_path, categories_path=categories_path),
        tmp_path / "out",
        cfg,
        category="world",
    )

    assert output_path.name == "world.json"
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert [a["id"] for a in payload["latest"]] == ["p5", "p4", "p3", "p2"]
    assert payload["pages"][0]["primary"]["hero"]["id"] == "p1"


def test_cli_render_from_files(tmp_path: Path):
    posts_path, categories_path = _write_inputs(tmp_path, [_post(i, i) for i in range(1, 4)])
    output_dir = tmp_path / "site"

    result = CliRunner().invoke(
        app,
        [
            "render",
            "--posts",
            str(posts_path),
            "--categories",
            str(categories_path),
            "-o",
            str(output_dir),
            "--format",
            "markdown",
            "--no-log-file",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "index.md").exists()
    assert not (output_dir / "run.jsonl").exists()


def test_cli_unknown_category_exits_with_error(tmp_path: Path):
    posts_path, categories_path = _write_inputs(tmp_path, [_post(1, 1)])

    result = CliRunner().invoke(
        app,
        [
            "render",
            "--posts",
            str(posts_path),
            "--categories",
            str(categories_path),
            "-o",
            str(tmp_path / "site"),
            "--category",
            "missing",
            "--no-log-file",
        ],
    )

    assert result.exit_code == 1
    assert "Category not found" in result.output


def test_cli_requires_a_source(tmp_path: Path, monkeypatch):
    monkeypatch.delenv("NEWSDESK_API_BASE_URL", raising=False)
    monkeypatch.chdir(tmp_path)

    result = CliRunner().invoke(app, ["render", "-o", str(tmp_path / "site")])

    assert result.exit_code == 2
