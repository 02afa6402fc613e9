"""``wtree clean``: find empty cache directories and stale worktree references."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wtree.detect.orchestrator import detect_config
from wtree.exceptions import ConfigError
from wtree.io import directory_size, is_empty_directory
from wtree.linker.globbing import is_glob
from wtree.model import CleanItem, CleanResult
from wtree.types import Worktree
from wtree.vcs import GitClient

logger = logging.getLogger(__name__)


def _cache_patterns(worktree: Worktree) -> tuple[str, ...]:
    try:
        config = detect_config(worktree.path).config
    except ConfigError as exc:
        logger.warning("Skipping %s: %s", worktree.path, exc)
        return ()
    return config.cache if config is not None else ()


def find_empty_caches(worktrees: list[Worktree]) -> list[CleanItem]:
    """Literal cache patterns that resolve to an empty real directory."""
    items: list[CleanItem] = []
    for worktree in worktrees:
        if not worktree.path.is_dir():
            continue
        for pattern in _cache_patterns(worktree):
            if is_glob(pattern):
                continue
            candidate: Path = worktree.path / pattern
            if candidate.is_symlink() or not is_empty_directory(candidate):
                continue
            items.append(
                CleanItem(
                    kind="directory",
                    path=candidate,
                    reason="Empty cache directory",
                    size=directory_size(candidate),
                )
            )
    return items


def clean(*, git: GitClient, dry_run: bool = False) -> CleanResult:
    """Report empty cache directories and stale worktree references.

    Unless ``dry_run`` is set, the directories are removed and stale
    references pruned. A dry run only counts the references that would go.
    """
    worktrees = [worktree for worktree in git.list_worktrees() if not worktree.bare]
    items = find_empty_caches(worktrees)
    stale = sum(1 for worktree in worktrees if not worktree.path.exists())

    if dry_run:
        return CleanResult(dry_run=True, items=tuple(items), pruned=stale)

    cleaned = 0
    for item in items:
        try:
            os.rmdir(item.path)
        except OSError as exc:
            logger.warning("Could not remove %s: %s", item.path, exc)
            continue
        cleaned += 1

    before = len(git.list_worktrees())
    git.prune_worktrees()
    pruned = before - len(git.list_worktrees())
    return CleanResult(dry_run=False, items=tuple(items), cleaned=cleaned, pruned=pruned)
