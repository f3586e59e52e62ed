"""Abstract interface for turning published documents into site artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ..config import OutputConfig
from ..core.types import Document


class Renderer(ABC):
    """Renderer interface: published documents in, files on disk out."""

    def __init__(self, cfg: OutputConfig):
        self.cfg = cfg

    @abstractmethod
    def render(self, documents: Sequence[Document], output_dir: Path) -> Path:
        """Write artifacts for ``documents`` under ``output_dir``.

        ``documents`` are already in publication order. Returns the path of
        the main artifact (the index).
        """
        raise NotImplementedError
