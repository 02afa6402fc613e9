"""``wtree restore``: link artifacts into an existing worktree."""

from __future__ import annotations

from pathlib import Path

from wtree.commands.common import absolute_path, current_worktree_or_none, find_source_worktree
from wtree.detect.orchestrator import config_for_worktree, detect_config
from wtree.exceptions import DetectionFailedError, WorktreeNotFoundError
from wtree.linker import ArtifactLinker
from wtree.model import RestoreResult
from wtree.types import ProgressCallback
from wtree.vcs import GitClient, select_best_source


def is_worktree_dir(path: Path) -> bool:
    return path.is_dir() and (path / ".git").exists()


def restore(
    *,
    path: Path,
    git: GitClient,
    linker: ArtifactLinker,
    from_branch: str | None = None,
    on_progress: ProgressCallback | None = None,
    output_to_stderr: bool = False,
) -> RestoreResult:
    """Restore artifacts into the worktree at ``path``.

    Without ``from_branch`` the source is chosen by :func:`select_best_source`
    and any warning it produces is carried on the result.
    """
    target = absolute_path(path)
    if not is_worktree_dir(target):
        raise WorktreeNotFoundError(f"Target path is not a valid worktree: {target}")

    warning: str | None = None
    if from_branch:
        source = find_source_worktree(git, from_branch)
    else:
        selection = select_best_source(
            git.list_worktrees(),
            config_for_worktree,
            current=current_worktree_or_none(git),
        )
        source = selection.worktree
        warning = selection.warning

    detection = detect_config(source.path)
    if detection.config is None:
        raise DetectionFailedError("No artifact configuration detected in source worktree")

    artifacts = linker.restore_artifacts(
        source.path,
        target,
        detection.config,
        on_progress=on_progress,
        output_to_stderr=output_to_stderr,
    )
    return RestoreResult(target=target, source=source, artifacts=artifacts, detection=detection, warning=warning)
