"""
Publish pass orchestration.

This module coordinates one stateless run:
1. Walk the content directory for source files
2. Load front matter into Documents (bad items aborted or skipped per config)
3. Apply publication rules (drafts, duplicate slugs, ordering)
4. Warn about near-duplicate titles
5. Render output files

Every run takes its source directory explicitly; nothing is cached between runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn

from .config import AppConfig
from .core.dedup import SimilarTitles, find_similar_titles
from .core.errors import ContentLoadFailed, ItemError
from .core.loader import load
from .core.publisher import publish
from .core.types import Document
from .input.source import iter_source_items
from .logging_utils import log_event, setup_logging
from .output.factory import create_renderer
from .output.markdown import MarkdownRenderer


@dataclass
class PassStats:
    """Counts collected during one publish pass.

    Attributes:
        total: Source items seen, valid or not
        invalid: Items rejected by the loader
        drafts: Valid items held back as drafts
        published: Documents in the published set
    """
    total: int = 0
    invalid: int = 0
    drafts: int = 0
    published: int = 0


@dataclass
class PublishResult:
    """Outcome of loading and publishing a content directory.

    Attributes:
        documents: Published documents in publication order
        errors: Per-item errors that were skipped
        similar_titles: Near-duplicate title pairs among published documents
        stats: Pass counters
    """
    documents: list[Document]
    errors: list[ItemError] = field(default_factory=list)
    similar_titles: list[SimilarTitles] = field(default_factory=list)
    stats: PassStats = field(default_factory=PassStats)


def collect_documents(
    input_dir: Path,
    cfg: AppConfig,
    logger: logging.Logger | None = None,
) -> PublishResult:
    """Load and publish every post under ``input_dir``.

    With ``validation.on_error == "abort"`` the whole directory is still
    loaded so every bad item is reported, then ContentLoadFailed is raised.
    With ``"skip"`` bad items are logged and left out.

    Raises:
        ContentLoadFailed: Items failed to load under the abort policy
        DuplicateSlug: Two published documents share a slug
    """
    errors: list[ItemError] = []

    def record(error: ItemError) -> None:
        errors.append(error)
        log_event(
            logger,
            f"Invalid item: {error}",
            level=logging.WARNING,
            event="item_invalid",
            item=error.item,
            error_type=type(error).__name__,
        )

    items = iter_source_items(
        input_dir,
        pattern=cfg.source.pattern,
        recursive=cfg.source.recursive,
        encoding=cfg.source.encoding,
        on_error=record,
    )
    loaded = list(load(items, on_error=record))

    if errors and cfg.validation.on_error == "abort":
        raise ContentLoadFailed(errors)

    documents = publish(loaded)

    similar: list[SimilarTitles] = []
    if cfg.dedup.enabled:
        similar = find_similar_titles(documents, cfg.dedup.title_similarity_threshold)
        for pair in similar:
            log_event(
                logger,
                f"Titles look alike: {pair.first.slug} / {pair.second.slug}",
                level=logging.WARNING,
                event="near_duplicate_title",
                first=pair.first.slug,
                second=pair.second.slug,
                score=round(pair.score, 1),
            )

    stats = PassStats(
        total=len(loaded) + len(errors),
        invalid=len(errors),
        drafts=sum(1 for document in loaded if document.draft),
        published=len(documents),
    )
    return PublishResult(documents=documents, errors=errors, similar_titles=similar, stats=stats)


def run_pipeline(
    input_dir: Path,
    output_dir: Path,
    cfg: AppConfig,
    show_progress: bool = True,
    console: Console | None = None,
) -> Path:
    """Run a complete publish pass and render the site.

    Args:
        input_dir: Directory holding the post source files
        output_dir: Directory for rendered output
        cfg: Application configuration
        show_progress: Whether to display a stage progress bar
        console: Rich console for output (creates default if None)

    Returns:
        Path to the rendered index file
    """
    console = console or Console()
    output_dir.mkdir(parents=True, exist_ok=True)
    logger = setup_logging(cfg.logging, Path(cfg.logging.directory))
    renderer = create_renderer(cfg.output)

    log_event(
        logger,
        "Pipeline start",
        event="pipeline_start",
        input=str(input_dir),
        output=str(output_dir),
        format=cfg.output.format,
    )

    progress = Progress(
        SpinnerColumn(),
        TextColumn("{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
        disable=not show_progress,
    )
    with progress:
        stage_task = progress.add_task("Publish", total=2)
        result = collect_documents(input_dir, cfg, logger)
        progress.advance(stage_task, 1)

        index_path = renderer.render(result.documents, output_dir)
        if cfg.output.include_markdown and not isinstance(renderer, MarkdownRenderer):
            MarkdownRenderer(cfg.output).render(result.documents, output_dir)
        progress.advance(stage_task, 1)

    _render_pass_stats(result.stats, console)
    log_event(
        logger,
        "Pipeline complete",
        event="pipeline_complete",
        output=str(index_path),
        total=result.stats.total,
        invalid=result.stats.invalid,
        drafts=result.stats.drafts,
        published=result.stats.published,
    )
    return index_path


def _render_pass_stats(stats: PassStats, console: Console) -> None:
    """Display publish pass statistics to the console."""
    console.print(
        "[bold]Publish summary[/bold]: "
        f"total={stats.total}, published={stats.published}, drafts={stats.drafts}, "
        f"invalid={stats.invalid}"
    )
