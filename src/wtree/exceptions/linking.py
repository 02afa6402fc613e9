"""Exceptions raised by the artifact copy engine."""

from __future__ import annotations

from pathlib import Path

from wtree.exceptions.base import ErrorCode, WtreeError


class CopyError(WtreeError):
    """A single artifact could not be linked or cloned.

    Non-fatal: the copy engine logs it and moves on to the next item.
    """

    code = ErrorCode.COPY_ERROR

    def __init__(self, message: str, *, source: Path, destination: Path) -> None:
        super().__init__(message)
        self.source = source
        self.destination = destination


class PostRestoreError(WtreeError):
    """The post-restore command exited with a non-zero status."""

    code = ErrorCode.POST_RESTORE_FAILED

    def __init__(self, command: str, exit_code: int) -> None:
        super().__init__(f"Post-restore command failed with exit code {exit_code}: {command}")
        self.command = command
        self.exit_code = exit_code
