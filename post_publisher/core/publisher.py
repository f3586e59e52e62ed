"""
Publication rules applied to a full set of loaded Documents.
"""

from __future__ import annotations

from typing import Iterable

from .errors import DuplicateSlug
from .types import Document


def publish(documents: Iterable[Document]) -> list[Document]:
    """Select and order the documents that go out.

    Drafts are dropped, slug uniqueness is checked across what remains, and
    the result is sorted newest first with ties broken by slug.

    Args:
        documents: Every loaded Document, drafts included

    Returns:
        Published documents in publication order

    Raises:
        DuplicateSlug: Two non-draft documents share a slug, compared
            case-insensitively since `A` and `a` name the same page on
            case-insensitive filesystems. Nothing is returned in that case.
    """
    published = [document for document in documents if not document.draft]

    seen: dict[str, Document] = {}
    for document in published:
        key = document.slug.casefold()
        existing = seen.get(key)
        if existing is not None:
            raise DuplicateSlug(document.slug, describe(existing), describe(document))
        seen[key] = document

    return sorted(published, key=publication_order)


def publication_order(document: Document) -> tuple[int, str]:
    """Sort key: date descending, then slug ascending."""
    return (-document.date.toordinal(), document.slug)


def describe(document: Document) -> str:
    """Label a document for error messages."""
    return document.source or f"document {document.title!r}"
