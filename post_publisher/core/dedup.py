"""
Near-duplicate title detection using fuzzy title comparison.

Exact slug collisions are fatal and handled by the publisher. This module
only flags published documents whose titles look alike, which usually means
the same post was copied under a new slug. Nothing is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz import fuzz

from .types import Document


@dataclass(frozen=True)
class SimilarTitles:
    """A pair of published documents whose titles look alike.

    Attributes:
        first: The document that comes first in publication order
        second: The later document
        score: rapidfuzz ratio (0-100) between the two titles
    """
    first: Document
    second: Document
    score: float


def find_similar_titles(documents: list[Document], threshold: int = 92) -> list[SimilarTitles]:
    """Return every pair of documents with title similarity >= threshold.

    Uses rapidfuzz's ratio function, which expresses the normalized
    Levenshtein distance as a similarity percentage. Titles are compared
    case-insensitively.

    Args:
        documents: Published documents, in publication order
        threshold: Minimum similarity (0-100) to report a pair

    Returns:
        Pairs in the order they were found, preserving document order
    """
    pairs: list[SimilarTitles] = []
    for index, first in enumerate(documents):
        for second in documents[index + 1:]:
            score = fuzz.ratio(first.title.lower(), second.title.lower())
            if score >= threshold:
                pairs.append(SimilarTitles(first=first, second=second, score=score))
    return pairs
