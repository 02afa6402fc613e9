"""Choosing which worktree to link artifacts from."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from wtree.constants.vcs import LEGACY_PRIMARY_BRANCH, PRIMARY_BRANCH
from wtree.exceptions import WorktreeNotFoundError
from wtree.linker.globbing import is_glob
from wtree.model import SourceSelection
from wtree.types import CacheConfig, Worktree


def has_populated_cache(path: Path, patterns: Iterable[str]) -> bool:
    """Return whether some literal pattern names a non-empty directory under ``path``.

    Glob patterns are ignored here.
    """
    for pattern in patterns:
        if is_glob(pattern):
            continue
        candidate = path / pattern
        if not candidate.is_dir():
            continue
        try:
            with os.scandir(candidate) as entries:
                if next(entries, None) is not None:
                    return True
        except OSError:
            continue
    return False


def select_best_source(
    worktrees: Sequence[Worktree],
    cache_config_for: Callable[[Path], CacheConfig | None],
    *,
    current: Worktree | None = None,
) -> SourceSelection:
    """Pick the worktree most likely to hold a warm artifact cache.

    Preference order: ``main`` with a populated cache, ``master`` with a
    populated cache, any worktree with a populated cache, ``current``, and
    finally the first non-bare worktree. The last three carry a warning.
    """
    candidates = [worktree for worktree in worktrees if not worktree.bare]
    if not candidates:
        raise WorktreeNotFoundError("No worktrees found to copy cache from")

    cached: list[Worktree] = []
    for worktree in candidates:
        config = cache_config_for(worktree.path)
        if config is not None and config.cache and has_populated_cache(worktree.path, config.cache):
            cached.append(worktree)

    for branch in (PRIMARY_BRANCH, LEGACY_PRIMARY_BRANCH):
        match = next((worktree for worktree in cached if worktree.branch == branch), None)
        if match is not None:
            return SourceSelection(worktree=match, source=branch)

    if cached:
        chosen = cached[0]
        return SourceSelection(
            worktree=chosen,
            source=chosen.branch,
            warning=f"Auto-detected source: {chosen.branch} (has cache)",
        )

    if current is not None:
        return SourceSelection(
            worktree=current,
            source=current.branch,
            warning=f"No cached worktrees found. Using current: {current.branch}",
        )

    first = candidates[0]
    return SourceSelection(
        worktree=first,
        source=first.branch,
        warning=f"No cached worktrees found. Using: {first.branch}",
    )
