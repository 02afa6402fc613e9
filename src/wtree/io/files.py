"""Filesystem inspection helpers."""

from __future__ import annotations

import os
from pathlib import Path

from wtree.constants.reporting import SIZE_UNITS


def is_empty_directory(path: Path) -> bool:
    try:
        with os.scandir(path) as entries:
            return next(entries, None) is None
    except OSError:
        return False


def directory_size(path: Path) -> int:
    """Return the apparent size in bytes of everything under ``path``.

    Symlinks are not followed and unreadable entries count as zero.
    """
    if path.is_symlink() or not path.is_dir():
        try:
            return path.lstat().st_size
        except OSError:
            return 0
    total = 0
    for dirpath, _dirnames, filenames in os.walk(path):
        for name in filenames:
            try:
                total += os.lstat(os.path.join(dirpath, name)).st_size
            except OSError:
                continue
    return total


def format_bytes(size: int) -> str:
    value = float(size)
    for unit in SIZE_UNITS[:-1]:
        if value < 1024:
            return f"{value:.0f} {unit}" if unit == SIZE_UNITS[0] else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} {SIZE_UNITS[-1]}"
