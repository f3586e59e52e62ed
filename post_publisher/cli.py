"""
Command-line interface for the post publisher.

Uses Typer to provide a CLI with options for the main configuration
settings. ``build`` renders the site; ``check`` validates content and shows
the publication order without writing anything.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import AppConfig, load_config, validate_config
from .core.errors import ContentError
from .runner import collect_documents, run_pipeline

app = typer.Typer(add_completion=False)
console = Console()


def _build_config(
    config: Path | None,
    on_error: str | None,
    log_level: str | None = None,
) -> AppConfig:
    try:
        cfg = load_config(str(config) if config else None)
        if on_error:
            cfg.validation.on_error = on_error
        if log_level:
            cfg.logging.level = log_level
        validate_config(cfg)
    except ValueError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    return cfg


@app.command()
def build(
    input: Path = typer.Option(..., "--input", "-i", exists=True, file_okay=False, readable=True),
    output: Path = typer.Option(Path("site"), "--output", "-o"),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    progress: bool = typer.Option(True, "--progress/--no-progress"),
    output_format: str | None = typer.Option(
        None, "--format", help="Output format: html or markdown."
    ),
    on_error: str | None = typer.Option(
        None, "--on-error", help="What to do with invalid posts: abort or skip."
    ),
    feed: bool | None = typer.Option(
        None, "--feed/--no-feed", help="Enable or disable the Atom feed."
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
    log_dir: Path | None = typer.Option(
        None, "--log-dir", file_okay=False, help="Directory for the run log."
    ),
):
    """Build the site from a directory of posts.

    Loads every post, drops drafts, checks slugs, orders by date and
    renders the result.

    Args:
        input: Directory containing post source files
        output: Directory for the rendered site
        config: Optional path to YAML config file
        progress: Whether to show progress bar
        output_format: Renderer to use (html, markdown)
        on_error: Invalid post policy (abort, skip)
        feed: Enable/disable the Atom feed
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
        log_dir: Directory for the run log, kept outside the site
    """
    cfg = _build_config(config, on_error, log_level)

    # Override with CLI options
    if output_format:
        cfg.output.format = output_format
    if feed is not None:
        cfg.output.feed = feed
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file
    if log_dir is not None:
        cfg.logging.directory = str(log_dir)

    try:
        index_path = run_pipeline(input, output, cfg, show_progress=progress, console=console)
    except ContentError as exc:
        console.print(f"[red]Publish failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    except ValueError as exc:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    console.print(f"Site generated: {index_path}")


@app.command()
def check(
    input: Path = typer.Option(..., "--input", "-i", exists=True, file_okay=False, readable=True),
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False),
    on_error: str | None = typer.Option(
        None, "--on-error", help="What to do with invalid posts: abort or skip."
    ),
):
    """Validate posts and print the publication order without rendering."""
    cfg = _build_config(config, on_error)

    try:
        result = collect_documents(input, cfg)
    except ContentError as exc:
        console.print(f"[red]Check failed:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    table = Table(title=f"Published posts ({len(result.documents)})")
    table.add_column("Date")
    table.add_column("Slug")
    table.add_column("Title")
    table.add_column("Author")
    for document in result.documents:
        table.add_row(
            document.date.isoformat(), document.slug, escape(document.title), escape(document.author)
        )
    console.print(table)

    for error in result.errors:
        console.print(f"[yellow]Skipped:[/yellow] {escape(str(error))}")
    for pair in result.similar_titles:
        console.print(
            f"[yellow]Similar titles:[/yellow] {pair.first.slug} / {pair.second.slug} "
            f"({pair.score:.0f})"
        )


if __name__ == "__main__":
    app()
