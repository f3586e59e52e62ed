"""Markdown index rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..core.types import Document
from .base import Renderer


class MarkdownRenderer(Renderer):
    """Writes a single ``index.md`` listing every published post."""

    filename = "index.md"

    def render(self, documents: Sequence[Document], output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / self.filename

        lines = [f"# {self.cfg.site_title}", "", f"Total: {len(documents)}", ""]
        for document in documents:
            lines.append(f"## {document.title}")
            lines.append(f"- Slug: {document.slug}")
            lines.append(f"- Date: {document.date.isoformat()}")
            lines.append(f"- Author: {document.author}")
            lines.append("")

        output_path.write_text("\n".join(lines), encoding="utf-8")
        return output_path
