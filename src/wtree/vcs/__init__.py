"""Git worktree access and source selection."""

from __future__ import annotations

from wtree.vcs.git import GitClient, parse_worktree_list
from wtree.vcs.source_selection import has_populated_cache, select_best_source

__all__ = [
    "GitClient",
    "has_populated_cache",
    "parse_worktree_list",
    "select_best_source",
]
