"""Constants for stdout formatting, progress rendering and JSON output."""

from __future__ import annotations

JSON_INDENT: int = 2

ARTIFACT_PREVIEW_LIMIT: int = 5
CLEAN_PREVIEW_LIMIT: int = 10

PROGRESS_BAR_WIDTH: int = 20
PROGRESS_MESSAGE_WIDTH: int = 40

SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_DIM: str = "\033[2m"
ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_CYAN: str = "\033[36m"
ANSI_MUTED: str = "\033[90m"

CHECK_MARK: str = "✓"
CROSS_MARK: str = "✗"
WARNING_MARK: str = "⚠"
ARROW_MARK: str = "→"
