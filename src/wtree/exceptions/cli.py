"""Invocation-level exceptions."""

from __future__ import annotations

from wtree.exceptions.base import ErrorCode, WtreeError


class InvalidArgumentsError(WtreeError):
    """Raised when a command is invoked with missing or contradictory arguments."""

    code = ErrorCode.INVALID_ARGS


class DetectionFailedError(WtreeError):
    """Raised when a command needs an artifact configuration and none was detected."""

    code = ErrorCode.DETECTION_FAILED
