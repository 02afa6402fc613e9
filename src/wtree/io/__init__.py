"""I/O helpers for wtree."""

from __future__ import annotations

from wtree.io.files import directory_size, format_bytes, is_empty_directory
from wtree.io.text_io import write_text_atomic

__all__ = [
    "directory_size",
    "format_bytes",
    "is_empty_directory",
    "write_text_atomic",
]
