"""``wtree doctor``: diagnose common setup problems."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

from wtree.config import validate_config_file
from wtree.constants.config import CONFIG_FILENAME
from wtree.detect.orchestrator import detect_config
from wtree.exceptions import ConfigError, GitError
from wtree.exceptions.validation import format_errors
from wtree.model import DoctorCheck, DoctorResult
from wtree.types import DetectionMethod, Worktree
from wtree.vcs import GitClient

_SUPPORTED_PLATFORMS = ("darwin", "linux")


def check_config_file(root: Path) -> DoctorCheck:
    name = "Configuration file"
    if (root / CONFIG_FILENAME).exists():
        errors = validate_config_file(root)
        if errors:
            return DoctorCheck(
                name=name,
                status="error",
                message=f"{CONFIG_FILENAME} has errors:\n{format_errors(errors)}",
                suggestion="Fix the YAML syntax or configuration values",
            )
        return DoctorCheck(name=name, status="ok", message=f"{CONFIG_FILENAME} is valid")

    detection = detect_config(root)
    if detection.method == DetectionMethod.NONE:
        return DoctorCheck(
            name=name,
            status="warning",
            message=f"No {CONFIG_FILENAME} found and no project type detected",
            suggestion="Run `wtree init` to generate a configuration file",
        )
    return DoctorCheck(
        name=name,
        status="ok",
        message=f"No {CONFIG_FILENAME} found, but auto-detect works ({detection.method})",
        suggestion="Run `wtree init` to create explicit configuration",
    )


def check_permissions(root: Path) -> DoctorCheck:
    name = "Worktree permissions"
    try:
        with tempfile.NamedTemporaryFile(dir=root, prefix=".wtree_test_"):
            pass
    except OSError:
        return DoctorCheck(
            name=name,
            status="error",
            message="Cannot write to current worktree directory",
            suggestion="Check directory permissions or run from a writable location",
        )
    return DoctorCheck(name=name, status="ok", message="Can write to current worktree")


def nested_worktrees(root: Path, worktrees: list[Worktree]) -> list[str]:
    """Relative paths of non-bare worktrees located inside ``root``."""
    resolved_root = root.resolve()
    nested: list[str] = []
    for worktree in worktrees:
        if worktree.bare:
            continue
        relative = os.path.relpath(worktree.path.resolve(), resolved_root)
        if relative != os.curdir and not relative.startswith(os.pardir):
            nested.append(relative)
    return nested


def check_nested_worktrees(root: Path, worktrees: list[Worktree]) -> DoctorCheck:
    name = "Nested worktrees"
    nested = nested_worktrees(root, worktrees)
    if not nested:
        return DoctorCheck(name=name, status="ok", message="No nested worktrees found")
    client = GitClient(root)
    unignored = [relative for relative in nested if not client.is_path_ignored(relative)]
    if unignored:
        return DoctorCheck(
            name=name,
            status="warning",
            message=f"{len(unignored)} nested worktree(s) found without .gitignore entry",
            suggestion="Add '.worktrees/' to .gitignore to avoid nested repository issues",
        )
    return DoctorCheck(name=name, status="ok", message=f"{len(nested)} nested worktree(s) properly ignored")


def check_platform(platform: str = sys.platform) -> DoctorCheck:
    name = "Platform support"
    if platform in _SUPPORTED_PLATFORMS:
        return DoctorCheck(name=name, status="ok", message=f"{platform} is fully supported")
    if platform == "win32":
        return DoctorCheck(
            name=name,
            status="warning",
            message="Windows support is experimental",
            suggestion="Use WSL for better compatibility",
        )
    return DoctorCheck(name=name, status="warning", message=f"Platform '{platform}' compatibility unknown")


def check_cache_patterns(root: Path) -> DoctorCheck:
    name = "Cache patterns"
    try:
        config = detect_config(root).config
    except ConfigError:
        return DoctorCheck(name=name, status="warning", message="Could not check cache patterns")
    if config is not None and config.cache:
        return DoctorCheck(name=name, status="ok", message=f"{len(config.cache)} pattern(s) configured")
    return DoctorCheck(
        name=name,
        status="warning",
        message="No cache patterns configured",
        suggestion=f"Add cache patterns to {CONFIG_FILENAME} or use a recipe",
    )


def doctor(*, git: GitClient) -> DoctorResult:
    """Run every health check; later checks are skipped outside a git repository."""
    if not git.is_git_repo():
        return DoctorResult(
            checks=(
                DoctorCheck(
                    name="Git repository",
                    status="error",
                    message="Not in a git repository",
                    suggestion="Run wtree from within a git repository",
                ),
            )
        )

    root = git.worktree_root()
    checks = [DoctorCheck(name="Git repository", status="ok", message=f"Found git repository at {root}")]

    worktrees: list[Worktree] = []
    try:
        worktrees = git.list_worktrees()
    except GitError:
        checks.append(
            DoctorCheck(
                name="Git worktree support",
                status="error",
                message="Git worktree command failed",
                suggestion="Update git to version 2.5+ which supports worktrees",
            )
        )
    else:
        checks.append(DoctorCheck(name="Git worktree support", status="ok", message="Git worktree command available"))

    checks.append(check_config_file(root))
    checks.append(check_permissions(root))
    checks.append(check_nested_worktrees(root, worktrees))
    checks.append(check_platform())
    checks.append(check_cache_patterns(root))
    return DoctorResult(checks=tuple(checks))
