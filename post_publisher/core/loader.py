"""
Turn raw source items into validated Documents.

``load`` is a generator: items are parsed one at a time as the caller
iterates, and calling ``load`` again on the same input yields an equal
sequence. Per-item errors either propagate (no ``on_error`` callback) or are
handed to the callback while the remaining items keep loading.
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Any, Callable, Iterable, Iterator, Mapping, Tuple, Union

from .errors import (
    InvalidDate,
    InvalidDraft,
    InvalidSlug,
    ItemError,
    MalformedMetadata,
    MetadataIncomplete,
)
from .frontmatter import parse_metadata
from .types import Document, SourceItem


logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("title", "slug", "date", "author")
RECOGNIZED_FIELDS = REQUIRED_FIELDS + ("draft",)

SLUG_RE = re.compile(r"[A-Za-z0-9-]+")
DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

RawItem = Union[SourceItem, Tuple[Any, str]]
ErrorHandler = Callable[[ItemError], None]


def load(items: Iterable[RawItem], on_error: ErrorHandler | None = None) -> Iterator[Document]:
    """Lazily parse source items into Documents.

    Args:
        items: SourceItems or ``(metadata, body)`` pairs, in any order
        on_error: Called with each per-item error; the item is skipped and
            loading continues. When None, the first error is raised.

    Yields:
        One Document per valid item, in input order
    """
    for position, raw in enumerate(items, start=1):
        label = _label(raw, position)
        try:
            document = parse_item(_as_source_item(raw, label), label)
        except ItemError as exc:
            if on_error is None:
                raise
            on_error(exc)
            continue
        yield document


def parse_item(item: SourceItem, label: str) -> Document:
    """Parse and validate a single item.

    Raises:
        MalformedMetadata, MetadataIncomplete, InvalidDate, InvalidSlug, InvalidDraft
    """
    if isinstance(item.metadata, Mapping):
        metadata = {str(key): value for key, value in item.metadata.items()}
    else:
        metadata = parse_metadata(item.metadata, label)

    unknown = sorted(key for key in metadata if key not in RECOGNIZED_FIELDS)
    if unknown:
        logger.debug(
            "Ignoring unrecognized front matter fields",
            extra={"item": label, "fields": unknown},
        )

    title = _text_field(metadata, "title", label)
    slug = _text_field(metadata, "slug", label)
    author = _text_field(metadata, "author", label)
    raw_date = metadata.get("date")

    values = {"title": title, "slug": slug, "date": raw_date, "author": author}
    missing = [name for name in REQUIRED_FIELDS if _is_blank(values[name])]
    if missing:
        raise MetadataIncomplete(label, missing)

    return Document(
        title=title,
        slug=_validate_slug(slug, label),
        date=_parse_date(raw_date, label),
        author=author,
        draft=_parse_draft(metadata.get("draft"), label),
        body=item.body,
        source=label,
    )


def _label(raw: RawItem, position: int) -> str:
    if isinstance(raw, SourceItem) and raw.source:
        return raw.source
    return f"item {position}"


def _as_source_item(raw: RawItem, label: str) -> SourceItem:
    if isinstance(raw, SourceItem):
        item = raw
    elif isinstance(raw, (tuple, list)) and len(raw) == 2:
        item = SourceItem(metadata=raw[0], body=raw[1])
    else:
        raise MalformedMetadata(label, "expected a (metadata, body) pair")

    if not isinstance(item.metadata, (str, Mapping)):
        raise MalformedMetadata(
            label, f"metadata must be text or a mapping, got {type(item.metadata).__name__}"
        )
    if not isinstance(item.body, str):
        raise MalformedMetadata(label, f"body must be text, got {type(item.body).__name__}")
    return item


def _text_field(metadata: dict[str, Any], name: str, label: str) -> str | None:
    """Return a scalar field as text; numbers in a pre-parsed mapping are taken as str()."""
    value = metadata.get(name)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedMetadata(label, f"field {name!r} must be a single text value")
    return str(value)


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _parse_date(value: Any, label: str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not DATE_RE.fullmatch(value.strip()):
        raise InvalidDate(label, value)
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidDate(label, value) from exc


def _validate_slug(value: str, label: str) -> str:
    if not SLUG_RE.fullmatch(value):
        raise InvalidSlug(label, value)
    return value


def _parse_draft(value: Any, label: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    raise InvalidDraft(label, value)
