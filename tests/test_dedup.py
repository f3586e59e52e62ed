"""Tests for near-duplicate title detection."""

from datetime import date

from post_publisher.core.dedup import find_similar_titles
from post_publisher.core.types import Document


def _doc(slug: str, title: str) -> Document:
    return Document(title=title, slug=slug, date=date(2020, 1, 1), author="X")


def test_flags_titles_that_differ_by_punctuation_or_case():
    documents = [
        _doc("tower-services", "Designing Tower services"),
        _doc("tower-services-copy", "Designing Tower Services."),
        _doc("async-traits", "Why async traits are hard"),
    ]

    pairs = find_similar_titles(documents, threshold=92)

    assert len(pairs) == 1
    assert (pairs[0].first.slug, pairs[0].second.slug) == ("tower-services", "tower-services-copy")
    assert pairs[0].score >= 92


def test_distinct_titles_are_not_flagged():
    documents = [_doc("a", "Middleware chains"), _doc("b", "Speculative async design")]

    assert find_similar_titles(documents) == []


def test_threshold_zero_pairs_everything():
    documents = [_doc("a", "One"), _doc("b", "Two"), _doc("c", "Three")]

    assert len(find_similar_titles(documents, threshold=0)) == 3
