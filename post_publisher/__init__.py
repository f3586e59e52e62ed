"""
Post Publisher - front-matter driven publishing for Markdown blog posts.

This package reads a directory of posts (YAML front matter + Markdown body),
validates their metadata, drops drafts, rejects slug collisions, orders the
rest newest first and renders an HTML site with an Atom feed.

Main entry point is the CLI via `post-publisher build` command.

Example:
    $ post-publisher build -i posts/ -o site/
"""

__all__ = ["__version__", "Document", "SourceItem", "load", "publish"]
__version__ = "0.1.0"

from .core.loader import load
from .core.publisher import publish
from .core.types import Document, SourceItem
