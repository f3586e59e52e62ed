"""
Core data types for the post publisher.

This module defines the fundamental data structures used throughout the pipeline:
- SourceItem: A raw front-matter block plus body, as supplied by a source walker
- Document: A validated, immutable post ready for publishing
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as Date
from typing import Any, Mapping


@dataclass(frozen=True)
class SourceItem:
    """A raw item handed to the loader.

    Attributes:
        metadata: Front-matter block text (YAML), or an already-parsed mapping
        body: Everything after the front matter, passed through untouched
        source: Optional label identifying the item (usually a relative file path)
    """
    metadata: str | Mapping[str, Any]
    body: str
    source: str | None = None


@dataclass(frozen=True)
class Document:
    """A post whose metadata has been fully parsed and validated.

    Documents compare equal on their content; ``source`` only records where
    the document came from and is left out of equality and hashing.

    Attributes:
        title: Human-readable title, never empty
        slug: URL-safe identifier (letters, digits, hyphen)
        date: Calendar date the post is filed under
        author: Author name
        draft: True if the post must not be published
        body: Unstructured body text, opaque to the pipeline
        source: Label of the item the document was parsed from
    """
    title: str
    slug: str
    date: Date
    author: str
    draft: bool = False
    body: str = ""
    source: str | None = field(default=None, compare=False)
