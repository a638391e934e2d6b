"""
Command-line interface for newsdesk.

Uses Typer to provide a CLI with options for the major configuration
settings. Supports loading .env files for the API base URL.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
import typer
from rich.console import Console

from .config import API_BASE_URL_ENV, get_api_base_url, load_config
from .runner import CategoryNotFoundError, Source, run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main() -> None:
    """Lay out published articles into front and category pages."""


@app.command()
def render(
    posts: Path | None = typer.Option(
        None, "--posts", "-p", exists=True, readable=True, help="Local JSON export of posts."
    ),
    categories: Path | None = typer.Option(
        None, "--categories", exists=True, readable=True, help="Local JSON export of categories."
    ),
    tags: Path | None = typer.Option(
        None, "--tags", exists=True, readable=True, help="Local JSON export of tags."
    ),
    api_url: str | None = typer.Option(
        None,
        "--api-url",
        envvar=API_BASE_URL_ENV,
        help=f"Content API base URL (or set {API_BASE_URL_ENV} / .env).",
    ),
    output: Path = typer.Option(Path("out"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True),
    category: str | None = typer.Option(None, "--category", help="Render a category page by slug."),
    subcategory: str | None = typer.Option(
        None, "--subcategory", help="Subcategory slug under --category."
    ),
    output_format: str | None = typer.Option(
        None, "--format", "-f", help="Output format: html, markdown or json."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """Render the front page (or a category page).

    Loads posts, categories and tags either from local JSON exports or
    from the content API, partitions the published posts into pages and
    writes the result to the output directory.

    Args:
        posts: Path to a posts JSON export
        categories: Path to a categories JSON export
        tags: Path to a tags JSON export
        api_url: Content API base URL
        output: Directory for output files
        config: Optional path to YAML config file
        category: Root category slug
        subcategory: Subcategory slug under the root category
        output_format: Output format override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Enable/disable file logging
    """
    load_dotenv()

    cfg = load_config(str(config) if config else None)

    if api_url:
        cfg.fetch.api_base_url = api_url
    if output_format:
        cfg.output.format = output_format
    if log_level:
        cfg.logging.level = log_level
    if log_file is not None:
        cfg.logging.file = log_file

    if subcategory and not category:
        console.print("[red]--subcategory requires --category[/red]")
        raise typer.Exit(code=2)
    if cfg.output.format not in ("html", "markdown", "json"):
        console.print(f"[red]Unknown output format: {cfg.output.format}[/red]")
        raise typer.Exit(code=2)

    source = Source(posts_path=posts, categories_path=categories, tags_path=tags)
    if not source.is_local and not get_api_base_url(cfg.fetch):
        console.print(f"[red]Provide --posts or --api-url (or set {API_BASE_URL_ENV}).[/red]")
        raise typer.Exit(code=2)

    try:
        output_path = run_pipeline(
            source,
            output,
            cfg,
            category=category,
            subcategory=subcategory,
            console=console,
        )
    except CategoryNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"Page generated: {output_path}")


if __name__ == "__main__":
    app()
