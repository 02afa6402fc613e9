"""Shared exception hierarchy for wtree."""

from __future__ import annotations

from .base import ErrorCode, WtreeError
from .cli import DetectionFailedError, InvalidArgumentsError
from .config import ConfigError, UnknownRecipeError
from .linking import CopyError, PostRestoreError
from .vcs import GitError, WorktreeExistsError, WorktreeNotFoundError

__all__ = [
    "ConfigError",
    "CopyError",
    "DetectionFailedError",
    "ErrorCode",
    "GitError",
    "InvalidArgumentsError",
    "PostRestoreError",
    "UnknownRecipeError",
    "WorktreeExistsError",
    "WorktreeNotFoundError",
    "WtreeError",
]
