"""
HTML site rendering using Jinja2 templates.

Produces:
- index.html: every published post, newest first
- posts/<slug>.html: one page per post, body rendered from Markdown
- feed.xml: Atom feed of the most recent posts (optional)

Output depends only on the documents and the output config; no wall-clock
time is embedded, so rebuilding unchanged content is byte-identical. Pages
and the feed left in the output directory by an earlier build are removed
when their post is no longer published or the feed is turned off.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown_it import MarkdownIt
from markupsafe import Markup

from ..config import OutputConfig
from ..core.types import Document
from .base import Renderer


POSTS_DIRNAME = "posts"
FEED_FILENAME = "feed.xml"


class HtmlRenderer(Renderer):
    """Renders index, per-post pages and an Atom feed."""

    def __init__(self, cfg: OutputConfig):
        super().__init__(cfg)
        self._env = Environment(
            loader=FileSystemLoader(str(Path(__file__).parent / "templates")),
            autoescape=select_autoescape(["html", "xml"]),
            keep_trailing_newline=True,
        )
        self._markdown = MarkdownIt("commonmark")

    def render(self, documents: Sequence[Document], output_dir: Path) -> Path:
        posts_dir = output_dir / POSTS_DIRNAME
        posts_dir.mkdir(parents=True, exist_ok=True)
        prune_stale_pages(posts_dir, documents)

        post_template = self._env.get_template("post.html")
        for document in documents:
            html = post_template.render(
                site_title=self.cfg.site_title,
                post=document,
                body_html=self.render_body(document),
            )
            (posts_dir / f"{document.slug}.html").write_text(html, encoding="utf-8")

        index_path = output_dir / "index.html"
        index_html = self._env.get_template("index.html").render(
            site_title=self.cfg.site_title,
            posts=[{"post": document, "href": post_href(document)} for document in documents],
            total=len(documents),
            feed=self.cfg.feed,
        )
        index_path.write_text(index_html, encoding="utf-8")

        feed_path = output_dir / FEED_FILENAME
        if self.cfg.feed:
            self.render_feed(documents, feed_path)
        elif feed_path.exists():
            feed_path.unlink()

        return index_path

    def render_body(self, document: Document) -> Markup:
        """Render a post body from Markdown to HTML.

        Raw HTML inside the Markdown is passed through, as authors expect
        from a blog engine; titles and other metadata stay autoescaped.
        """
        return Markup(self._markdown.render(document.body))

    def render_feed(self, documents: Sequence[Document], output_path: Path) -> None:
        """Write an Atom feed of the newest ``feed_limit`` documents."""
        base_url = self.cfg.base_url.rstrip("/")
        entries = [
            {
                "post": document,
                "url": f"{base_url}/{post_href(document)}",
                "updated": atom_timestamp(document),
                # plain str so the template escapes it; Atom type="html" carries markup as text
                "content": self._markdown.render(document.body),
            }
            for document in documents[: self.cfg.feed_limit]
        ]
        xml = self._env.get_template("feed.xml").render(
            site_title=self.cfg.site_title,
            base_url=base_url,
            updated=entries[0]["updated"] if entries else "1970-01-01T00:00:00Z",
            entries=entries,
        )
        output_path.write_text(xml, encoding="utf-8")


def prune_stale_pages(posts_dir: Path, documents: Sequence[Document]) -> list[Path]:
    """Delete post pages left by earlier builds whose slug is no longer published."""
    current = {f"{document.slug}.html" for document in documents}
    removed = []
    for page in sorted(posts_dir.glob("*.html")):
        if page.name not in current:
            page.unlink()
            removed.append(page)
    return removed


def post_href(document: Document) -> str:
    """Relative link from the site root to a post page."""
    return f"{POSTS_DIRNAME}/{document.slug}.html"


def atom_timestamp(document: Document) -> str:
    return f"{document.date.isoformat()}T00:00:00Z"
