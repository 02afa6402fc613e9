"""``wtree list``: show worktrees with their artifact status."""

from __future__ import annotations

import logging
import os

from wtree.commands.common import same_path
from wtree.detect.orchestrator import detect_config
from wtree.exceptions import ConfigError
from wtree.linker.globbing import is_glob
from wtree.model import ArtifactStatus, DetectionResult, ListResult, WorktreeListing
from wtree.types import DetectionMethod, Worktree
from wtree.vcs import GitClient

logger = logging.getLogger(__name__)


def _detect(worktree: Worktree) -> DetectionResult:
    if not worktree.path.is_dir():
        return DetectionResult(method=DetectionMethod.NONE)
    try:
        return detect_config(worktree.path)
    except ConfigError as exc:
        logger.warning("Ignoring config of %s: %s", worktree.path, exc)
        return DetectionResult(method=DetectionMethod.NONE)


def list_worktrees(*, git: GitClient) -> ListResult:
    """List non-bare worktrees; glob patterns are reported but never checked on disk."""
    current = git.current_worktree()
    listings: list[WorktreeListing] = []
    for worktree in git.list_worktrees():
        if worktree.bare:
            continue
        detection = _detect(worktree)
        artifacts = tuple(
            ArtifactStatus(
                pattern=pattern,
                exists=not is_glob(pattern) and os.path.lexists(worktree.path / pattern),
            )
            for pattern in detection.cache_patterns
        )
        listings.append(
            WorktreeListing(
                worktree=worktree,
                current=same_path(worktree.path, current.path),
                detection=detection,
                artifacts=artifacts,
            )
        )
    return ListResult(worktrees=tuple(listings))
