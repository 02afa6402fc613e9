"""Git and worktree exceptions."""

from __future__ import annotations

from pathlib import Path

from wtree.exceptions.base import ErrorCode, WtreeError


class GitError(WtreeError):
    """Raised when a git command fails."""

    code = ErrorCode.GIT_ERROR

    def __init__(self, message: str, *, command: tuple[str, ...] = (), stderr: str = "") -> None:
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class WorktreeExistsError(GitError):
    """Raised when a worktree already exists for the requested branch."""

    code = ErrorCode.WORKTREE_EXISTS

    def __init__(self, branch: str, path: Path) -> None:
        super().__init__(f"Worktree already exists for branch '{branch}' at {path}")
        self.branch = branch
        self.path = path


class WorktreeNotFoundError(GitError):
    """Raised when a worktree cannot be located by path or branch."""

    code = ErrorCode.WORKTREE_NOT_FOUND
