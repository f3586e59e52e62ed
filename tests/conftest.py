from __future__ import annotations

from pathlib import Path

import pytest

from post_publisher.config import AppConfig


def _write_post(
    directory: Path,
    name: str,
    *,
    title: str = "A post",
    slug: str | None = None,
    date: str = "2020-01-01",
    author: str = "X",
    draft: str | None = None,
    body: str = "Body text.\n",
) -> Path:
    lines = ["---", f"title: {title}"]
    if slug is not None:
        lines.append(f"slug: {slug}")
    lines.append(f"date: {date}")
    lines.append(f"author: {author}")
    if draft is not None:
        lines.append(f"draft: {draft}")
    lines.append("---")
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
    return path


@pytest.fixture
def write_post():
    """Write a post file with front matter built from keyword arguments."""
    return _write_post


@pytest.fixture
def quiet_config() -> AppConfig:
    cfg = AppConfig()
    cfg.logging.console = False
    cfg.logging.file = False
    return cfg
