"""CLI exit codes and environment switches."""

from __future__ import annotations

EXIT_OK: int = 0
EXIT_FAILURE: int = 1
EXIT_USAGE_ERROR: int = 2

ENV_NO_COLOR: str = "NO_COLOR"
ENV_CI: str = "CI"
