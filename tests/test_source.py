"""Tests for reading post files from a content directory."""

from pathlib import Path

import pytest

from post_publisher.core.errors import MalformedMetadata
from post_publisher.input.source import iter_source_items, list_source_files


def test_items_are_labelled_and_sorted(tmp_path: Path, write_post) -> None:
    write_post(tmp_path, "b.md", slug="b")
    write_post(tmp_path, "2020/a.md", slug="a")
    (tmp_path / "notes.txt").write_text("not a post", encoding="utf-8")

    items = list(iter_source_items(tmp_path))

    assert [item.source for item in items] == ["2020/a.md", "b.md"]
    assert "slug: a" in items[0].metadata
    assert items[0].body == "Body text.\n"


def test_non_recursive_walk_skips_subdirectories(tmp_path: Path, write_post) -> None:
    write_post(tmp_path, "top.md", slug="top")
    write_post(tmp_path, "nested/deep.md", slug="deep")

    paths = list_source_files(tmp_path, recursive=False)

    assert [path.name for path in paths] == ["top.md"]


def test_unclosed_front_matter_raises_without_handler(tmp_path: Path) -> None:
    (tmp_path / "open.md").write_text("---\ntitle: A\n", encoding="utf-8")

    with pytest.raises(MalformedMetadata) as excinfo:
        list(iter_source_items(tmp_path))

    assert excinfo.value.item == "open.md"


def test_unreadable_files_go_to_handler(tmp_path: Path, write_post) -> None:
    write_post(tmp_path, "good.md", slug="good")
    (tmp_path / "latin1.md").write_bytes("---\ntitle: caf\xe9\n---\n".encode("latin-1"))
    (tmp_path / "open.md").write_text("---\ntitle: A\n", encoding="utf-8")
    errors = []

    items = list(iter_source_items(tmp_path, on_error=errors.append))

    assert [item.source for item in items] == ["good.md"]
    assert sorted(error.item for error in errors) == ["latin1.md", "open.md"]
