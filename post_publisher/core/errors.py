"""
Errors raised while loading and publishing documents.

Per-item errors (``ItemError`` subclasses) always carry the label of the
offending item so a content author can find the source text. Publish-level
errors (``DuplicateSlug``) abort the whole pass.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence


class ContentError(ValueError):
    """Base class for every content pipeline error."""


class ItemError(ContentError):
    """A single source item could not be turned into a Document."""

    def __init__(self, item: str, message: str):
        self.item = item
        super().__init__(f"{item}: {message}")


class MalformedMetadata(ItemError):
    """The front-matter block is not a parseable mapping."""

    def __init__(self, item: str, reason: str):
        self.reason = reason
        super().__init__(item, f"malformed front matter ({reason})")


class MetadataIncomplete(ItemError):
    """One or more required fields are absent or blank."""

    def __init__(self, item: str, missing_fields: Iterable[str]):
        self.missing_fields = tuple(missing_fields)
        fields = ", ".join(self.missing_fields)
        super().__init__(item, f"missing required field(s): {fields}")


class InvalidDate(ItemError):
    """The ``date`` field is not an ISO-8601 calendar date."""

    def __init__(self, item: str, raw_value: Any):
        self.raw_value = raw_value
        super().__init__(item, f"field 'date' is not a YYYY-MM-DD date: {raw_value!r}")


class InvalidSlug(ItemError):
    """The ``slug`` field uses characters outside letters, digits and hyphen."""

    def __init__(self, item: str, raw_value: Any):
        self.raw_value = raw_value
        super().__init__(
            item,
            f"field 'slug' may only contain letters, digits and '-': {raw_value!r}",
        )


class InvalidDraft(ItemError):
    """The ``draft`` field is present but not a boolean literal."""

    def __init__(self, item: str, raw_value: Any):
        self.raw_value = raw_value
        super().__init__(item, f"field 'draft' must be true or false: {raw_value!r}")


class DuplicateSlug(ContentError):
    """Two published documents share a slug."""

    def __init__(self, slug: str, item_a: str, item_b: str):
        self.slug = slug
        self.item_a = item_a
        self.item_b = item_b
        super().__init__(f"duplicate slug {slug!r} used by {item_a} and {item_b}")


class ContentLoadFailed(ContentError):
    """One or more items failed to load and the run is configured to abort."""

    def __init__(self, errors: Sequence[ItemError]):
        self.errors = list(errors)
        lines = [f"{len(self.errors)} item(s) failed to load:"]
        lines.extend(f"  {error}" for error in self.errors)
        super().__init__("\n".join(lines))
