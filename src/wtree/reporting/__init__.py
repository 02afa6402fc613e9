"""Output rendering for wtree: human-readable text, progress and JSON."""

from __future__ import annotations

from wtree.reporting.json_output import render_json
from wtree.reporting.progress import ProgressTracker, should_show_progress

__all__ = ["ProgressTracker", "render_json", "should_show_progress"]
