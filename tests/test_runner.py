"""Tests for the publish pass orchestration."""

import json
from pathlib import Path

import pytest

from post_publisher import runner
from post_publisher.core.errors import ContentLoadFailed, DuplicateSlug, MetadataIncomplete


def _content_dir(tmp_path: Path, write_post) -> Path:
    content = tmp_path / "content"
    write_post(content, "a.md", title="A", slug="a", date="2020-01-01", draft="false")
    write_post(content, "b.md", title="B", slug="b", date="2021-01-01", draft="true")
    write_post(content, "c.md", title="C", slug="c", date="2019-01-01")
    return content


def test_collect_documents_publishes_in_order(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)

    result = runner.collect_documents(content, quiet_config)

    assert [document.slug for document in result.documents] == ["a", "c"]
    assert result.errors == []
    assert (result.stats.total, result.stats.drafts, result.stats.published) == (3, 1, 2)


def test_abort_policy_reports_every_bad_item(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)
    (content / "no-date.md").write_text("---\ntitle: D\nslug: d\nauthor: X\n---\n", encoding="utf-8")
    (content / "open.md").write_text("---\ntitle: E\n", encoding="utf-8")

    with pytest.raises(ContentLoadFailed) as excinfo:
        runner.collect_documents(content, quiet_config)

    assert sorted(error.item for error in excinfo.value.errors) == ["no-date.md", "open.md"]
    assert "no-date.md" in str(excinfo.value)


def test_skip_policy_publishes_the_rest(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)
    (content / "no-date.md").write_text("---\ntitle: D\nslug: d\nauthor: X\n---\n", encoding="utf-8")
    quiet_config.validation.on_error = "skip"

    result = runner.collect_documents(content, quiet_config)

    assert [document.slug for document in result.documents] == ["a", "c"]
    assert len(result.errors) == 1
    assert isinstance(result.errors[0], MetadataIncomplete)
    assert result.errors[0].missing_fields == ("date",)
    assert result.stats.invalid == 1


def test_duplicate_slug_fails_even_when_skipping(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)
    write_post(content, "copy-of-a.md", title="Another A", slug="a", date="2022-01-01")
    quiet_config.validation.on_error = "skip"

    with pytest.raises(DuplicateSlug) as excinfo:
        runner.collect_documents(content, quiet_config)

    assert {excinfo.value.item_a, excinfo.value.item_b} == {"a.md", "copy-of-a.md"}


def test_similar_titles_are_reported(tmp_path: Path, write_post, quiet_config) -> None:
    content = tmp_path / "content"
    write_post(content, "one.md", title="Designing Tower services", slug="one")
    write_post(content, "two.md", title="Designing Tower Services.", slug="two")

    result = runner.collect_documents(content, quiet_config)

    assert [(pair.first.slug, pair.second.slug) for pair in result.similar_titles] == [("one", "two")]

    quiet_config.dedup.enabled = False
    assert runner.collect_documents(content, quiet_config).similar_titles == []


def test_run_pipeline_is_idempotent(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)

    first = runner.run_pipeline(content, tmp_path / "out1", quiet_config, show_progress=False)
    second = runner.run_pipeline(content, tmp_path / "out2", quiet_config, show_progress=False)

    assert first.name == "index.html"
    assert first.read_bytes() == second.read_bytes()
    assert (tmp_path / "out1" / "feed.xml").read_bytes() == (tmp_path / "out2" / "feed.xml").read_bytes()
    assert sorted(path.name for path in (tmp_path / "out1" / "posts").iterdir()) == ["a.html", "c.html"]


def test_run_pipeline_writes_jsonl_log(tmp_path: Path, write_post, quiet_config) -> None:
    content = _content_dir(tmp_path, write_post)
    quiet_config.logging.file = True
    quiet_config.logging.directory = str(tmp_path / "logs")
    quiet_config.output.include_markdown = True
    output = tmp_path / "out"

    runner.run_pipeline(content, output, quiet_config, show_progress=False)

    assert (output / "index.md").exists()
    events = [
        json.loads(line)
        for line in (tmp_path / "logs" / "run.jsonl").read_text(encoding="utf-8").splitlines()
    ]
    names = [event.get("event") for event in events]
    assert names[0] == "pipeline_start"
    assert names[-1] == "pipeline_complete"
    assert events[-1]["published"] == 2
    assert not (output / "run.jsonl").exists()
