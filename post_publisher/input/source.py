"""Read post files from a content directory into SourceItems."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterator

from ..core.errors import ItemError, MalformedMetadata
from ..core.frontmatter import split_front_matter
from ..core.types import SourceItem


def list_source_files(input_dir: Path, pattern: str = "*.md", recursive: bool = True) -> list[Path]:
    """List matching files under a content directory in sorted path order."""
    paths = input_dir.rglob(pattern) if recursive else input_dir.glob(pattern)
    return sorted(path for path in paths if path.is_file())


def iter_source_items(
    input_dir: Path,
    pattern: str = "*.md",
    recursive: bool = True,
    encoding: str = "utf-8",
    on_error: Callable[[ItemError], None] | None = None,
) -> Iterator[SourceItem]:
    """Yield one SourceItem per matching file.

    Each item is labelled with its path relative to ``input_dir`` (POSIX
    separators) so error messages point at the file to fix. Files are read
    lazily, one per iteration step.

    Args:
        input_dir: Content directory to walk
        pattern: Glob pattern for post files
        recursive: Whether to descend into subdirectories
        encoding: Text encoding of the files
        on_error: Receives files whose front matter cannot be split; they
            are skipped. When None, the error is raised.

    Raises:
        MalformedMetadata: A file is unreadable as text or opens a
            front-matter block without closing it, and no ``on_error`` was given
    """
    for path in list_source_files(input_dir, pattern, recursive):
        label = path.relative_to(input_dir).as_posix()
        try:
            text = _read_text(path, label, encoding)
            metadata, body = split_front_matter(text, label)
        except ItemError as exc:
            if on_error is None:
                raise
            on_error(exc)
            continue
        yield SourceItem(metadata=metadata, body=body, source=label)


def _read_text(path: Path, label: str, encoding: str) -> str:
    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise MalformedMetadata(label, f"file is not valid {encoding} text") from exc
