"""Helpers shared by several commands."""

from __future__ import annotations

import os
from pathlib import Path

from wtree.exceptions import GitError, WorktreeNotFoundError
from wtree.types import Worktree
from wtree.vcs import GitClient


def absolute_path(path: Path) -> Path:
    """Absolute, normalised form of ``path`` without resolving symlinks."""
    return Path(os.path.abspath(path))


def same_path(left: Path, right: Path) -> bool:
    return left.resolve() == right.resolve()


def find_source_worktree(git: GitClient, branch: str) -> Worktree:
    worktree = git.find_worktree_by_branch(branch)
    if worktree is None:
        raise WorktreeNotFoundError(f"Source worktree not found: {branch}")
    return worktree


def current_worktree_or_none(git: GitClient) -> Worktree | None:
    try:
        return git.current_worktree()
    except GitError:
        return None
