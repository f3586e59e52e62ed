"""Renderer registry keyed by output format name."""

from __future__ import annotations

from ..config import OutputConfig
from .base import Renderer
from .html import HtmlRenderer
from .markdown import MarkdownRenderer


RendererBuilder = type[Renderer]

_RENDERER_REGISTRY: dict[str, RendererBuilder] = {
    "html": HtmlRenderer,
    "markdown": MarkdownRenderer,
    "md": MarkdownRenderer,
}


def available_renderers() -> list[str]:
    """Return the set of registered output formats."""
    return sorted(_RENDERER_REGISTRY.keys())


def create_renderer(output_cfg: OutputConfig, fmt: str | None = None) -> Renderer:
    """Build a renderer for ``fmt`` (defaults to ``output_cfg.format``)."""
    name = (fmt or output_cfg.format).lower().strip()
    builder = _RENDERER_REGISTRY.get(name)
    if builder is None:
        supported = ", ".join(available_renderers())
        raise ValueError(
            f"Unsupported output format: {fmt or output_cfg.format}. Supported: {supported}"
        )
    return builder(output_cfg)
