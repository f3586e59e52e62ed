"""
Output stage: renderers that turn published documents into site files.
"""

from .base import Renderer
from .factory import available_renderers, create_renderer
from .html import HtmlRenderer
from .markdown import MarkdownRenderer

__all__ = [
    "Renderer",
    "HtmlRenderer",
    "MarkdownRenderer",
    "available_renderers",
    "create_renderer",
]
