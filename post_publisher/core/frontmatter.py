"""
Front-matter splitting and parsing.

A source file looks like:

    ---
    title: Designing a service abstraction
    slug: service-abstraction
    date: 2019-06-12
    author: Jane Doe
    draft: false
    ---
    Body text in Markdown...

The block between the delimiters is YAML. Timestamps and numbers are not
resolved by the YAML loader: dates are validated in one place (the loader),
and a slug such as `0x1A` or `010` keeps the exact text the author wrote.
"""

from __future__ import annotations

from typing import Any

import yaml

from .errors import MalformedMetadata


OPENING_DELIMITER = "---"
CLOSING_DELIMITERS = ("---", "...")

# Scalars with these tags stay exactly as written; booleans and nulls still resolve
_TEXT_TAGS = frozenset(
    {
        "tag:yaml.org,2002:timestamp",
        "tag:yaml.org,2002:int",
        "tag:yaml.org,2002:float",
    }
)


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps implicit timestamps and numbers as plain strings."""


FrontMatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in _TEXT_TAGS]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def split_front_matter(text: str, item: str) -> tuple[str, str]:
    """Split raw file text into its front-matter block and body.

    Args:
        text: Full file content
        item: Label used in error messages

    Returns:
        A ``(metadata_text, body)`` tuple. Text without an opening delimiter
        yields an empty metadata block and the whole text as body.

    Raises:
        MalformedMetadata: The opening delimiter is never closed
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != OPENING_DELIMITER:
        return "", text

    for index in range(1, len(lines)):
        if lines[index].rstrip() in CLOSING_DELIMITERS:
            metadata = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            return metadata, body

    raise MalformedMetadata(item, "front matter opened with '---' but never closed")


def parse_metadata(block: str, item: str) -> dict[str, Any]:
    """Parse a front-matter block into a mapping.

    An empty block parses to an empty mapping; the caller decides which
    fields are missing.

    Raises:
        MalformedMetadata: The block is not valid YAML or not a mapping
    """
    if not block.strip():
        return {}
    try:
        data = yaml.load(block, Loader=FrontMatterLoader)  # noqa: S506
    except yaml.YAMLError as exc:
        raise MalformedMetadata(item, _describe_yaml_error(exc)) from exc
    except ValueError as exc:
        # Explicitly tagged values (e.g. !!timestamp) that fail construction
        raise MalformedMetadata(item, str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedMetadata(item, f"expected key/value pairs, got {type(data).__name__}")
    return {str(key): value for key, value in data.items()}


def _describe_yaml_error(exc: yaml.YAMLError) -> str:
    mark = getattr(exc, "problem_mark", None)
    problem = getattr(exc, "problem", None) or "invalid YAML"
    if mark is None:
        return str(problem)
    return f"{problem} at front matter line {mark.line + 1}, column {mark.column + 1}"
