"""Infer artifact patterns from well-known ``.gitignore`` entries."""

from __future__ import annotations

import logging
from pathlib import Path

from wtree.constants.config import GITIGNORE_FILENAME
from wtree.constants.gitignore import COMMENT_PREFIX, GITIGNORE_HINTS, NEGATION_PREFIX
from wtree.constants.linking import PATH_SEPARATOR
from wtree.types import CacheConfig

logger = logging.getLogger(__name__)


def parse_gitignore(content: str) -> list[str]:
    """Return the literal entries of a ``.gitignore`` body.

    Blank lines, comments and negations are dropped and trailing separators are
    removed. As an extension over plain suffix stripping, a single leading root
    anchor is removed too, so ``/node_modules/`` reads as ``node_modules``.
    """
    entries: list[str] = []
    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX) or line.startswith(NEGATION_PREFIX):
            continue
        line = line.rstrip(PATH_SEPARATOR)
        if line.startswith(PATH_SEPARATOR):
            line = line[1:]
        if line:
            entries.append(line)
    return entries


def infer_from_gitignore_text(content: str) -> CacheConfig | None:
    """Map recognised entries through the hint table; ``None`` when nothing maps."""
    patterns: list[str] = []
    for entry in parse_gitignore(content):
        patterns.extend(GITIGNORE_HINTS.get(entry, ()))
    if not patterns:
        return None
    return CacheConfig(cache=tuple(patterns))


def infer_from_gitignore(root: Path) -> CacheConfig | None:
    path = root / GITIGNORE_FILENAME
    if not path.is_file():
        return None
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None
    return infer_from_gitignore_text(content)
