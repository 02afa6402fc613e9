"""Pattern expansion and containment de-duplication for artifact paths."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path, PurePosixPath

from wtree.constants.linking import GLOB_CHARS, PATH_SEPARATOR

logger = logging.getLogger(__name__)


def is_glob(pattern: str) -> bool:
    return any(char in GLOB_CHARS for char in pattern)


def _is_safe_pattern(pattern: str) -> bool:
    if not pattern.strip():
        return False
    pure = PurePosixPath(pattern)
    return not pure.is_absolute() and ".." not in pure.parts


def expand_patterns(source_root: Path, patterns: Iterable[str]) -> list[str]:
    """Expand cache patterns into existing paths relative to ``source_root``.

    Matching is case-sensitive. Patterns pathlib rejects, such as a ``**``
    that is not a whole path component, are logged and skipped. Results keep
    pattern order and may repeat across patterns; use :func:`deduplicate_paths`
    to collapse them.
    """
    paths: list[str] = []
    for pattern in patterns:
        if not _is_safe_pattern(pattern):
            logger.warning("Skipping unsafe cache pattern %r", pattern)
            continue
        if not is_glob(pattern):
            candidate = source_root / pattern
            if candidate.exists() or candidate.is_symlink():
                paths.append(PurePosixPath(pattern).as_posix())
            continue
        try:
            matches = sorted(source_root.glob(pattern, case_sensitive=True))
        except ValueError as exc:
            logger.warning("Skipping invalid cache pattern %r: %s", pattern, exc)
            continue
        paths.extend(match.relative_to(source_root).as_posix() for match in matches)
    return paths


def deduplicate_paths(paths: Iterable[str]) -> list[str]:
    """Sort ``paths`` and drop every entry equal to or nested under an earlier one.

    ``a-b`` is not nested under ``a``; containment is bounded by ``/``.
    """
    kept: list[str] = []
    kept_set: set[str] = set()
    for path in sorted(paths):
        parts = path.split(PATH_SEPARATOR)
        ancestors = (PATH_SEPARATOR.join(parts[:depth]) for depth in range(1, len(parts) + 1))
        if any(ancestor in kept_set for ancestor in ancestors):
            continue
        kept.append(path)
        kept_set.add(path)
    return kept


def plan_copies(source_root: Path, patterns: Iterable[str]) -> list[str]:
    return deduplicate_paths(expand_patterns(source_root, patterns))
