"""Git-related constants."""

from __future__ import annotations

GIT_EXECUTABLE: str = "git"

PRIMARY_BRANCH: str = "main"
LEGACY_PRIMARY_BRANCH: str = "master"

PORCELAIN_WORKTREE_PREFIX: str = "worktree "
PORCELAIN_BRANCH_PREFIX: str = "branch refs/heads/"
PORCELAIN_HEAD_PREFIX: str = "HEAD "
PORCELAIN_BARE: str = "bare"
DETACHED_HASH_LENGTH: int = 7
