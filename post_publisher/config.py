"""
Configuration management using YAML files and dataclasses.

This module defines all configuration dataclasses and provides loading
from YAML files with defaults. Configuration sections:
- SourceConfig: Which files make up the source set
- ValidationConfig: What to do with items that fail validation
- DedupConfig: Near-duplicate title warnings
- OutputConfig: Output format settings
- LoggingConfig: Logging behavior
- AppConfig: Root configuration container
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import yaml


ON_ERROR_POLICIES = ("abort", "skip")


@dataclass
class SourceConfig:
    """Configuration for discovering source files.

    Attributes:
        pattern: Glob pattern matched against file names
        recursive: Whether to descend into subdirectories
        encoding: Text encoding used to read source files
    """

    pattern: str = "*.md"
    recursive: bool = True
    encoding: str = "utf-8"


@dataclass
class ValidationConfig:
    """Configuration for per-item validation failures.

    Attributes:
        on_error: "abort" fails the run after reporting every bad item,
            "skip" logs a warning per bad item and publishes the rest
    """

    on_error: str = "abort"


@dataclass
class DedupConfig:
    """Configuration for near-duplicate title detection.

    Attributes:
        enabled: Whether to compare published titles at all
        title_similarity_threshold: Fuzzy match threshold (0-100) for title similarity
    """

    enabled: bool = True
    title_similarity_threshold: int = 92


@dataclass
class OutputConfig:
    """Configuration for output generation.

    Attributes:
        format: "html" or "markdown"
        site_title: Title used for the index page and the feed
        base_url: Absolute site URL used for feed links
        feed: Whether the HTML renderer also writes an Atom feed
        feed_limit: Maximum number of entries in the feed
        include_markdown: Whether to also write a markdown index when format is "html"
    """

    format: str = "html"
    site_title: str = "Posts"
    base_url: str = "https://example.com"
    feed: bool = True
    feed_limit: int = 20
    include_markdown: bool = False


@dataclass
class LoggingConfig:
    """Configuration for logging behavior.

    Attributes:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
        console: Whether to log to console
        file: Whether to log to file
        format: Log file format ("jsonl" or "plain")
        filename: Name of the main log file
        directory: Directory for the log file, relative to the working
            directory. Kept apart from the rendered site so run logs are
            never deployed with it.
    """

    level: str = "INFO"
    console: bool = True
    file: bool = True
    format: str = "jsonl"
    filename: str = "run.jsonl"
    directory: str = "logs"


@dataclass
class AppConfig:
    """Root configuration container aggregating all config sections."""

    source: SourceConfig = field(default_factory=SourceConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    dedup: DedupConfig = field(default_factory=DedupConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | None) -> AppConfig:
    """Load configuration from a YAML file with defaults."""
    if not path:
        return AppConfig()

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    cfg = _merge_config(AppConfig(), raw)
    validate_config(cfg)
    return cfg


def validate_config(cfg: AppConfig) -> None:
    """Reject config values the pipeline cannot act on."""
    if cfg.validation.on_error not in ON_ERROR_POLICIES:
        supported = ", ".join(ON_ERROR_POLICIES)
        raise ValueError(
            f"Unsupported validation.on_error: {cfg.validation.on_error}. Supported: {supported}"
        )
    if not 0 <= cfg.dedup.title_similarity_threshold <= 100:
        raise ValueError("dedup.title_similarity_threshold must be between 0 and 100")
    if cfg.output.feed_limit < 1:
        raise ValueError("output.feed_limit must be at least 1")


def _merge_config(base: AppConfig, raw: dict[str, Any]) -> AppConfig:
    """Merge raw YAML config into base AppConfig."""
    data = _asdict(base)
    for key, value in raw.items():
        if key not in data or value is None:
            continue
        if not isinstance(value, dict):
            raise ValueError(f"Config section {key!r} must be a mapping")
        # Unknown keys inside a known section are ignored like unknown sections
        data[key].update({name: item for name, item in value.items() if name in data[key]})
    return _fromdict(data)


def _asdict(cfg: AppConfig) -> dict[str, Any]:
    """Convert AppConfig to nested dictionary."""
    return {
        "source": {
            "pattern": cfg.source.pattern,
            "recursive": cfg.source.recursive,
            "encoding": cfg.source.encoding,
        },
        "validation": {
            "on_error": cfg.validation.on_error,
        },
        "dedup": {
            "enabled": cfg.dedup.enabled,
            "title_similarity_threshold": cfg.dedup.title_similarity_threshold,
        },
        "output": {
            "format": cfg.output.format,
            "site_title": cfg.output.site_title,
            "base_url": cfg.output.base_url,
            "feed": cfg.output.feed,
            "feed_limit": cfg.output.feed_limit,
            "include_markdown": cfg.output.include_markdown,
        },
        "logging": {
            "level": cfg.logging.level,
            "console": cfg.logging.console,
            "file": cfg.logging.file,
            "format": cfg.logging.format,
            "filename": cfg.logging.filename,
            "directory": cfg.logging.directory,
        },
    }


def _fromdict(data: dict[str, Any]) -> AppConfig:
    """Reconstruct AppConfig from nested dictionary."""
    return AppConfig(
        source=SourceConfig(**data["source"]),
        validation=ValidationConfig(**data["validation"]),
        dedup=DedupConfig(**data["dedup"]),
        output=OutputConfig(**data["output"]),
        logging=LoggingConfig(**data["logging"]),
    )
