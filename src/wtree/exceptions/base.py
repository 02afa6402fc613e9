"""Root exception and error codes for wtree."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Stable error codes surfaced in structured (JSON) output."""

    UNKNOWN = "UNKNOWN"
    GIT_ERROR = "GIT_ERROR"
    WORKTREE_EXISTS = "WORKTREE_EXISTS"
    WORKTREE_NOT_FOUND = "WORKTREE_NOT_FOUND"
    CONFIG_ERROR = "CONFIG_ERROR"
    COPY_ERROR = "COPY_ERROR"
    POST_RESTORE_FAILED = "POST_RESTORE_FAILED"
    DETECTION_FAILED = "DETECTION_FAILED"
    INVALID_ARGS = "INVALID_ARGS"


class WtreeError(Exception):
    """Base class for all wtree errors.

    Subclasses pin ``code`` so callers never need to match on message text.
    """

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def to_dict(self) -> dict[str, object]:
        """Serialize as the structured error record used by ``--json``."""
        return {"error": True, "code": str(self.code), "message": self.message}
