"""``wtree analyze``: report what detection finds for a worktree."""

from __future__ import annotations

from pathlib import Path

from wtree.detect.orchestrator import detect_config
from wtree.model import AnalyzeResult
from wtree.vcs import GitClient


def analyze(*, git: GitClient, root: Path | None = None) -> AnalyzeResult:
    root = root if root is not None else git.worktree_root()
    return AnalyzeResult(root=root, detection=detect_config(root))
