"""
Input stage: discover source files and split them into SourceItems.
"""

from .source import iter_source_items, list_source_files

__all__ = ["iter_source_items", "list_source_files"]
