"""``wtree remove``: remove a worktree by path or branch."""

from __future__ import annotations

from pathlib import Path

from wtree.commands.common import same_path
from wtree.exceptions import GitError, WorktreeNotFoundError
from wtree.model import RemoveResult
from wtree.vcs import GitClient


def remove(*, target: str, git: GitClient, force: bool = False) -> RemoveResult:
    """Remove the worktree matching ``target``, tried as a path first and then as a branch.

    The worktree the command runs from can never be removed.
    """
    worktree = git.find_worktree_by_path(Path(target)) or git.find_worktree_by_branch(target)
    if worktree is None:
        raise WorktreeNotFoundError(f"Worktree not found: {target}")

    if same_path(worktree.path, git.current_worktree().path):
        raise GitError("Cannot remove the current worktree. Switch to a different worktree first.")

    git.remove_worktree(worktree.path, force=force)
    return RemoveResult(removed=worktree)
