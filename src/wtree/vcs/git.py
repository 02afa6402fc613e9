"""Thin wrapper around the ``git`` command line for worktree operations."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from wtree.constants.vcs import (
    DETACHED_HASH_LENGTH,
    GIT_EXECUTABLE,
    PORCELAIN_BARE,
    PORCELAIN_BRANCH_PREFIX,
    PORCELAIN_HEAD_PREFIX,
    PORCELAIN_WORKTREE_PREFIX,
)
from wtree.exceptions import GitError
from wtree.types import Worktree

logger = logging.getLogger(__name__)


def parse_worktree_list(output: str) -> list[Worktree]:
    """Parse ``git worktree list --porcelain`` output.

    Detached worktrees are named after their abbreviated commit hash, and the
    first entry (the primary checkout) is flagged ``is_main``.
    """
    worktrees: list[Worktree] = []
    for block in output.strip().split("\n\n"):
        path = ""
        branch = ""
        bare = False
        for line in block.splitlines():
            if line.startswith(PORCELAIN_WORKTREE_PREFIX):
                path = line.removeprefix(PORCELAIN_WORKTREE_PREFIX)
            elif line.startswith(PORCELAIN_BRANCH_PREFIX):
                branch = line.removeprefix(PORCELAIN_BRANCH_PREFIX)
            elif line.startswith(PORCELAIN_HEAD_PREFIX) and not branch:
                branch = line.removeprefix(PORCELAIN_HEAD_PREFIX)[:DETACHED_HASH_LENGTH]
            elif line == PORCELAIN_BARE:
                bare = True
        if path:
            worktrees.append(Worktree(path=Path(path), branch=branch, bare=bare, is_main=not worktrees))
    return worktrees


def _resolve(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except OSError:
        return path.absolute()


class GitClient:
    """Runs git commands from ``cwd`` (the process working directory by default)."""

    def __init__(self, cwd: Path | None = None) -> None:
        self.cwd = cwd

    def _run(self, *args: str) -> str:
        command = (GIT_EXECUTABLE, *args)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(command, cwd=self.cwd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise GitError(f"Could not run {GIT_EXECUTABLE}: {exc}", command=command) from exc
        if result.returncode != 0:
            stderr = result.stderr.strip()
            raise GitError(f"Command failed: {' '.join(command)}\n{stderr}", command=command, stderr=stderr)
        return result.stdout

    def worktree_root(self) -> Path:
        return Path(self._run("rev-parse", "--show-toplevel").strip())

    def is_git_repo(self) -> bool:
        try:
            self._run("rev-parse", "--git-dir")
        except GitError:
            return False
        return True

    def current_branch(self) -> str:
        """Checked-out branch name, or the short commit hash when HEAD is detached."""
        branch = self._run("rev-parse", "--abbrev-ref", "HEAD").strip()
        if branch == "HEAD":
            return self._run("rev-parse", "--short", "HEAD").strip()
        return branch

    def branch_exists(self, name: str) -> bool:
        try:
            self._run("rev-parse", "--verify", "--quiet", f"refs/heads/{name}")
        except GitError:
            return False
        return True

    def list_worktrees(self) -> list[Worktree]:
        return parse_worktree_list(self._run("worktree", "list", "--porcelain"))

    def current_worktree(self) -> Worktree:
        root = _resolve(self.worktree_root())
        for worktree in self.list_worktrees():
            if _resolve(worktree.path) == root:
                return worktree
        raise GitError("Could not determine current worktree")

    def find_worktree_by_branch(self, branch: str) -> Worktree | None:
        return next((w for w in self.list_worktrees() if w.branch == branch), None)

    def find_worktree_by_path(self, path: Path) -> Worktree | None:
        """Match ``path`` against known worktrees after resolving symlinks on both sides."""
        target = _resolve(path)
        return next((w for w in self.list_worktrees() if _resolve(w.path) == target), None)

    def create_worktree(
        self,
        branch: str,
        path: Path,
        *,
        base_branch: str | None = None,
        create_branch: bool = False,
    ) -> None:
        """Add a worktree at ``path``.

        With ``create_branch`` a new branch is created from ``base_branch``
        (or HEAD), unless the branch already exists, in which case it is
        checked out as-is.
        """
        if create_branch and not self.branch_exists(branch):
            args = ["worktree", "add", "-b", branch, str(path)]
            if base_branch:
                args.append(base_branch)
        else:
            args = ["worktree", "add", str(path), branch]
        self._run(*args)

    def remove_worktree(self, path: Path, *, force: bool = False) -> None:
        args = ["worktree", "remove"]
        if force:
            args.append("--force")
        args.append(str(path))
        self._run(*args)

    def prune_worktrees(self) -> None:
        self._run("worktree", "prune")

    def is_path_ignored(self, path: str) -> bool:
        try:
            self._run("check-ignore", "-q", path)
        except GitError:
            return False
        return True
