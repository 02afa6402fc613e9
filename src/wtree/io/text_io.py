"""Atomic text persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str,
    temp_suffix: str,
    overwrite: bool = True,
) -> None:
    """Persist text atomically by writing to a temp file then renaming.

    With ``overwrite=False`` the final step uses a hardlink instead of a
    rename, so an existing ``path`` raises ``FileExistsError`` untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
        if overwrite:
            os.replace(temp_name, path)
        else:
            os.link(temp_name, path)
    finally:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
