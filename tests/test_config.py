"""Tests for YAML config loading."""

from pathlib import Path

import pytest

from post_publisher.config import AppConfig, load_config


def test_load_config_without_path_returns_fresh_defaults():
    first = load_config(None)
    first.output.format = "markdown"

    assert load_config(None).output.format == "html"
    assert load_config(None) == AppConfig()


def test_load_config_merges_sections_over_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "validation:\n"
        "  on_error: skip\n"
        "output:\n"
        "  site_title: Notes\n"
        "  feed: false\n"
        "  unknown_key: 1\n"
        "logging:\n"
        "  directory: var/log/posts\n"
        "comments:\n"
        "  enabled: true\n",
        encoding="utf-8",
    )

    cfg = load_config(str(path))

    assert cfg.validation.on_error == "skip"
    assert cfg.output.site_title == "Notes"
    assert cfg.output.feed is False
    assert cfg.output.format == "html"
    assert cfg.dedup.title_similarity_threshold == 92
    assert cfg.logging.directory == "var/log/posts"
    assert cfg.logging.filename == "run.jsonl"


def test_empty_config_file_uses_defaults(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(str(path)) == AppConfig()


@pytest.mark.parametrize(
    "content, message",
    [
        ("validation:\n  on_error: ignore\n", "on_error"),
        ("dedup:\n  title_similarity_threshold: 150\n", "title_similarity_threshold"),
        ("output: html\n", "must be a mapping"),
        ("- a\n- b\n", "mapping at the top level"),
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str, message: str):
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        load_config(str(path))
