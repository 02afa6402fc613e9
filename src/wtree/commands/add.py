"""``wtree add``: create a worktree and link artifacts into it."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from wtree.commands.common import absolute_path, find_source_worktree
from wtree.detect.orchestrator import detect_config
from wtree.exceptions import WorktreeExistsError
from wtree.linker import ArtifactLinker
from wtree.model import AddResult, CopyResult
from wtree.types import ProgressCallback, Worktree
from wtree.vcs import GitClient

logger = logging.getLogger(__name__)


def resolve_branch(path: Path, *, branch: str | None, new_branch: str | None) -> tuple[str, bool]:
    """Return ``(branch, create)`` following ``git worktree add`` conventions.

    ``-b NAME`` creates ``NAME``; a second positional checks out an existing
    branch; otherwise a new branch is named after the target directory.
    """
    if new_branch:
        return new_branch, True
    if branch:
        return branch, False
    return path.name, True


def nested_worktree_warning(source: Worktree, target: Path) -> str | None:
    """Warn when ``target`` sits inside the source repository without being ignored."""
    repo_root = source.path.resolve()
    relative = os.path.relpath(target.resolve(), repo_root)
    if relative == os.curdir or relative.startswith(os.pardir):
        return None
    if GitClient(repo_root).is_path_ignored(relative):
        return None
    top_level = PurePath(relative).parts[0]
    return f'Add "{top_level}/" to .gitignore to avoid committing worktree contents'


def add(
    *,
    path: Path,
    git: GitClient,
    linker: ArtifactLinker,
    branch: str | None = None,
    new_branch: str | None = None,
    from_branch: str | None = None,
    on_progress: ProgressCallback | None = None,
    output_to_stderr: bool = False,
) -> AddResult:
    """Create a worktree at ``path`` and populate it from the source worktree's artifacts."""
    target = absolute_path(path)
    branch_name, create_branch = resolve_branch(target, branch=branch, new_branch=new_branch)

    source = find_source_worktree(git, from_branch) if from_branch else git.current_worktree()

    existing = git.find_worktree_by_branch(branch_name)
    if existing is not None:
        raise WorktreeExistsError(branch_name, existing.path)

    detection = detect_config(source.path)
    warning = nested_worktree_warning(source, target)

    GitClient(source.path).create_worktree(
        branch_name,
        target,
        base_branch=source.branch if create_branch else None,
        create_branch=create_branch,
    )
    logger.info("Created worktree %s on branch %s", target, branch_name)

    artifacts = CopyResult()
    if detection.config is not None:
        artifacts = linker.restore_artifacts(
            source.path,
            target,
            detection.config,
            on_progress=on_progress,
            output_to_stderr=output_to_stderr,
        )

    return AddResult(
        worktree=Worktree(path=target, branch=branch_name),
        source=source,
        artifacts=artifacts,
        detection=detection,
        warning=warning,
    )
