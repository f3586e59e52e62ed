"""
Core domain models and business logic.

This package contains the document types, the loader and the publication
rules. Nothing here touches the filesystem.
"""

from .types import Document, SourceItem
from .errors import (
    ContentError,
    ContentLoadFailed,
    DuplicateSlug,
    InvalidDate,
    InvalidDraft,
    InvalidSlug,
    ItemError,
    MalformedMetadata,
    MetadataIncomplete,
)
from .frontmatter import parse_metadata, split_front_matter
from .loader import load, parse_item
from .publisher import publication_order, publish
from .dedup import SimilarTitles, find_similar_titles

__all__ = [
    "Document",
    "SourceItem",
    "ContentError",
    "ContentLoadFailed",
    "DuplicateSlug",
    "InvalidDate",
    "InvalidDraft",
    "InvalidSlug",
    "ItemError",
    "MalformedMetadata",
    "MetadataIncomplete",
    "parse_metadata",
    "split_front_matter",
    "load",
    "parse_item",
    "publication_order",
    "publish",
    "SimilarTitles",
    "find_similar_titles",
]
