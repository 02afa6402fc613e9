"""Hardlink-based copies of files and directory trees."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def hardlink_tree(source: Path, destination: Path) -> None:
    """Recreate ``source`` at ``destination`` with every regular file hardlinked.

    Directories are rebuilt, symlinks are copied as symlinks, and the
    parent of ``destination`` must already exist.
    """
    if source.is_symlink():
        os.symlink(os.readlink(source), destination)
    elif source.is_dir():
        shutil.copytree(source, destination, symlinks=True, copy_function=os.link)
    else:
        os.link(source, destination)
