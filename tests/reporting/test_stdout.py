"""Tests for human-readable formatting of command results."""

from __future__ import annotations

from pathlib import Path

from wtree.exceptions import WorktreeExistsError
from wtree.model import (
    AddResult,
    AnalyzeResult,
    ArtifactStatus,
    CleanItem,
    CleanResult,
    CopyResult,
    DetectionResult,
    DoctorCheck,
    DoctorResult,
    InitResult,
    ListResult,
    RemoveResult,
    RestoreResult,
    WorktreeListing,
)
from wtree.reporting.stdout import (
    format_add,
    format_analyze,
    format_clean,
    format_doctor,
    format_error,
    format_init,
    format_list,
    format_remove,
    format_restore,
)
from wtree.types import CacheConfig, DetectionMethod, Worktree

MAIN = Worktree(path=Path("/repos/app"), branch="main", is_main=True)
PNPM = DetectionResult(
    method=DetectionMethod.SINGLE_SIGNATURE,
    config=CacheConfig(cache=("node_modules",), recipe="pnpm"),
    recipes=("pnpm",),
    detected_files=("pnpm-lock.yaml",),
)


def test_add_lists_copied_artifacts_with_overflow() -> None:
    copied = tuple(f"packages/p{i}/node_modules" for i in range(7))
    result = AddResult(
        worktree=Worktree(path=Path("/repos/feature"), branch="feature"),
        source=MAIN,
        artifacts=CopyResult(patterns=("**/node_modules",), attempted=copied, copied=copied),
        detection=PNPM,
    )

    lines = format_add(result, color=False).splitlines()

    assert lines[0] == "✓ Created worktree at /repos/feature"
    assert "  Branch: feature" in lines
    assert "  Source: /repos/app (main)" in lines
    assert "  Recipe: pnpm" in lines
    assert "  Artifacts: 7 copied" in lines
    assert "    + packages/p0/node_modules" in lines
    assert "    ... and 2 more" in lines


def test_add_without_configuration() -> None:
    result = AddResult(
        worktree=Worktree(path=Path("/repos/feature"), branch="feature"),
        source=MAIN,
        artifacts=CopyResult(),
        detection=DetectionResult(method=DetectionMethod.NONE),
        warning='Add ".worktrees/" to .gitignore to avoid committing worktree contents',
    )

    rendered = format_add(result, color=False)

    assert "No artifact caching configured" in rendered
    assert rendered.endswith('⚠ Add ".worktrees/" to .gitignore to avoid committing worktree contents')


def test_restore_shows_merged_recipes_and_warning() -> None:
    detection = DetectionResult(
        method=DetectionMethod.MERGED_SIGNATURES,
        config=CacheConfig(cache=("node_modules", "target"), recipe="npm"),
        recipes=("npm", "rust"),
    )
    result = RestoreResult(
        target=Path("/repos/feature"),
        source=MAIN,
        artifacts=CopyResult(patterns=("node_modules", "target")),
        detection=detection,
        warning="Auto-detected source: main (has cache)",
    )

    rendered = format_restore(result, color=False)

    assert "  Recipes: npm, rust" in rendered
    assert "No new artifacts to copy" in rendered
    assert "Auto-detected source: main (has cache)" in rendered


def test_analyze_reports_method_files_and_patterns() -> None:
    rendered = format_analyze(AnalyzeResult(root=Path("/repos/app"), detection=PNPM), color=False)

    assert "Method: Built-in recipe (pnpm)" in rendered
    assert "Detected files: pnpm-lock.yaml" in rendered
    assert "Cache patterns: node_modules" in rendered


def test_analyze_without_configuration() -> None:
    result = AnalyzeResult(root=Path("/repos/app"), detection=DetectionResult(method=DetectionMethod.NONE))

    rendered = format_analyze(result, color=False)

    assert "Method: No configuration detected" in rendered
    assert "No artifacts would be cached." in rendered


def test_remove_message() -> None:
    rendered = format_remove(RemoveResult(removed=Worktree(path=Path("/repos/feature"), branch="feature")))

    assert rendered == "Removed worktree at /repos/feature (branch: feature)"


def test_list_marks_current_and_missing_artifacts() -> None:
    listing = WorktreeListing(
        worktree=MAIN,
        current=True,
        detection=PNPM,
        artifacts=(
            ArtifactStatus(pattern="node_modules", exists=True),
            ArtifactStatus(pattern=".turbo", exists=False),
            ArtifactStatus(pattern="**/node_modules", exists=False),
        ),
    )
    other = WorktreeListing(
        worktree=Worktree(path=Path("/repos/detached"), branch=""),
        current=False,
        detection=DetectionResult(method=DetectionMethod.NONE),
    )

    lines = format_list(ListResult(worktrees=(listing, other)), color=False).splitlines()

    assert lines[0] == "* main"
    assert "    Cached: node_modules" in lines
    assert "    Missing: .turbo" in lines
    assert "  (detached)" in lines


def test_list_without_worktrees() -> None:
    assert format_list(ListResult(), color=False) == "No worktrees found."


def test_init_created_and_existing() -> None:
    created = format_init(InitResult(created=True, path=Path("/repos/app/.wtree.yaml"), recipe="npm"), color=False)
    existing = format_init(
        InitResult(
            created=False,
            path=Path("/repos/app/.wtree.yaml"),
            message="Configuration file already exists",
            suggestion="Use `wtree analyze` to see current configuration",
        ),
        color=False,
    )

    assert created.splitlines()[0] == "✓ Created .wtree.yaml"
    assert "Extends: npm recipe" in created
    assert existing.splitlines()[0] == "⚠ Configuration file already exists"
    assert existing.endswith("Use `wtree analyze` to see current configuration")


def test_doctor_summary_and_suggestions() -> None:
    result = DoctorResult(
        checks=(
            DoctorCheck(name="Git repository", status="ok", message="Found git repository at /repos/app"),
            DoctorCheck(
                name="Cache patterns",
                status="warning",
                message="No cache patterns configured",
                suggestion="Add cache patterns to .wtree.yaml or use a recipe",
            ),
        )
    )

    lines = format_doctor(result, color=False).splitlines()

    assert lines[0] == "⚠ Healthy with warnings"
    assert lines[2] == "✓ 1 passed  ⚠ 1 warnings  ✗ 0 errors"
    assert "  → Add cache patterns to .wtree.yaml or use a recipe" in lines


def test_doctor_with_errors_is_unhealthy() -> None:
    result = DoctorResult(
        checks=(DoctorCheck(name="Git repository", status="error", message="Not in a git repository"),)
    )

    assert format_doctor(result, color=False).startswith("✗ Issues found")
    assert result.healthy is False


def test_clean_dry_run_summary() -> None:
    result = CleanResult(
        dry_run=True,
        items=(CleanItem(kind="directory", path=Path("/repos/app/node_modules"), reason="Empty cache directory"),),
        pruned=1,
    )

    rendered = format_clean(result, color=False)

    assert rendered.startswith("⚠ Dry run - no changes made")
    assert "Items found: 1" in rendered
    assert "Would prune 1 stale worktree reference(s)" in rendered
    assert rendered.endswith("→ Run without --dry-run to clean these items")


def test_clean_nothing_to_do() -> None:
    assert format_clean(CleanResult(dry_run=False), color=False) == "✓ Nothing to clean"


def test_color_wraps_with_ansi_codes() -> None:
    rendered = format_remove(RemoveResult(removed=MAIN), color=True)
    error = format_error(WorktreeExistsError("main", Path("/repos/app")), color=True)

    assert "\033[" not in rendered
    assert error.startswith("\033[31m✗ Error:\033[0m")
    assert "Worktree already exists for branch 'main' at /repos/app" in error
