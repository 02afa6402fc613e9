"""Human-readable rendering of command results."""

from __future__ import annotations

from wtree.constants.reporting import (
    ANSI_BOLD,
    ANSI_CYAN,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_MUTED,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    ARROW_MARK,
    ARTIFACT_PREVIEW_LIMIT,
    CHECK_MARK,
    CLEAN_PREVIEW_LIMIT,
    CROSS_MARK,
    WARNING_MARK,
)
from wtree.exceptions import WtreeError
from wtree.io import format_bytes
from wtree.model import (
    AddResult,
    AnalyzeResult,
    CleanResult,
    CopyResult,
    DetectionResult,
    DoctorResult,
    InitResult,
    ListResult,
    RemoveResult,
    RestoreResult,
)
from wtree.types import DetectionMethod

_METHOD_LABELS: dict[DetectionMethod, str] = {
    DetectionMethod.EXPLICIT: "Explicit configuration (.wtree.yaml)",
    DetectionMethod.GITIGNORE: "Inferred from .gitignore",
    DetectionMethod.NONE: "No configuration detected",
}


class Styler:
    """Wraps text in ANSI codes, or passes it through when colour is disabled."""

    def __init__(self, *, color: bool = True) -> None:
        self.color = color

    def __call__(self, text: str, *codes: str) -> str:
        if not self.color or not codes:
            return text
        return f"{''.join(codes)}{text}{ANSI_RESET}"


def _recipe_lines(detection: DetectionResult, style: Styler) -> list[str]:
    if len(detection.recipes) > 1:
        return [f"  {style('Recipes:', ANSI_MUTED)} {', '.join(detection.recipes)}"]
    if detection.recipe:
        return [f"  {style('Recipe:', ANSI_MUTED)} {detection.recipe}"]
    return []


def _artifact_lines(artifacts: CopyResult, style: Styler, *, empty_message: str) -> list[str]:
    copied = artifacts.copied
    if not copied:
        return [f"  {style(empty_message, ANSI_MUTED)}"]
    lines = [f"  {style('Artifacts:', ANSI_MUTED)} {style(str(len(copied)), ANSI_GREEN)} copied"]
    lines.extend(f"    {style('+', ANSI_GREEN)} {artifact}" for artifact in copied[:ARTIFACT_PREVIEW_LIMIT])
    if len(copied) > ARTIFACT_PREVIEW_LIMIT:
        lines.append(f"    {style(f'... and {len(copied) - ARTIFACT_PREVIEW_LIMIT} more', ANSI_MUTED)}")
    return lines


def _warning_lines(warning: str | None, style: Styler) -> list[str]:
    if not warning:
        return []
    return ["", f"{style(WARNING_MARK, ANSI_YELLOW)} {style(warning, ANSI_YELLOW)}"]


def format_add(result: AddResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    lines = [
        f"{style(CHECK_MARK, ANSI_GREEN)} Created worktree at {style(str(result.worktree.path), ANSI_BOLD)}",
        f"  {style('Branch:', ANSI_MUTED)} {result.worktree.branch}",
        f"  {style('Source:', ANSI_MUTED)} {result.source.path} ({result.source.branch})",
        *_recipe_lines(result.detection, style),
    ]
    if result.artifacts.patterns:
        empty = "No artifacts found to copy"
    else:
        empty = "No artifact caching configured"
    lines += _artifact_lines(result.artifacts, style, empty_message=empty)
    lines += _warning_lines(result.warning, style)
    return "\n".join(lines)


def format_restore(result: RestoreResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    lines = [
        f"{style(CHECK_MARK, ANSI_GREEN)} Restored artifacts to {style(str(result.target), ANSI_BOLD)}",
        f"  {style('Source:', ANSI_MUTED)} {result.source.path} ({result.source.branch})",
        *_recipe_lines(result.detection, style),
    ]
    lines += _artifact_lines(result.artifacts, style, empty_message="No new artifacts to copy")
    lines += _warning_lines(result.warning, style)
    return "\n".join(lines)


def format_analyze(result: AnalyzeResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    detection = result.detection
    if detection.method == DetectionMethod.SINGLE_SIGNATURE:
        method = f"Built-in recipe ({detection.recipe})"
    elif detection.method == DetectionMethod.MERGED_SIGNATURES:
        method = f"Merged recipes ({', '.join(detection.recipes)})"
    else:
        method = _METHOD_LABELS[detection.method]

    lines = [style("Detection Results", ANSI_BOLD), "=================", "", f"Method: {method}"]
    if detection.detected_files:
        lines.append(f"Detected files: {', '.join(detection.detected_files)}")
    lines.append("")

    config = detection.config
    if config is None:
        lines += [
            "No artifacts would be cached.",
            "",
            "To configure caching, create a .wtree.yaml file or use a",
            "supported project structure (pnpm, npm, yarn, rust, etc.).",
        ]
        return "\n".join(lines)

    lines += [style("Configuration", ANSI_BOLD), "-------------"]
    lines.append(f"Cache patterns: {', '.join(config.cache) if config.cache else style('(none)', ANSI_MUTED)}")
    if config.post_restore:
        lines.append(f"Post-restore: {config.post_restore}")
    return "\n".join(lines)


def format_remove(result: RemoveResult, *, color: bool = True) -> str:
    return f"Removed worktree at {result.removed.path} (branch: {result.removed.branch})"


def format_list(result: ListResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    if not result.worktrees:
        return style("No worktrees found.", ANSI_MUTED)

    blocks: list[str] = []
    for entry in result.worktrees:
        branch = entry.worktree.branch or "(detached)"
        if entry.current:
            header = f"{style('* ', ANSI_GREEN)}{style(branch, ANSI_BOLD, ANSI_GREEN)}"
        else:
            header = f"  {branch}"
        lines = [header, f"    {style(str(entry.worktree.path), ANSI_MUTED)}"]
        if len(entry.detection.recipes) > 1:
            lines.append(f"    {style('Recipes:', ANSI_MUTED)} {', '.join(entry.detection.recipes)}")
        elif entry.detection.recipe:
            lines.append(f"    {style('Recipe:', ANSI_MUTED)} {entry.detection.recipe}")
        cached = [status.pattern for status in entry.artifacts if status.exists]
        missing = [status.pattern for status in entry.artifacts if not status.exists and not status.is_glob]
        if cached:
            lines.append(f"    {style('Cached:', ANSI_GREEN)} {', '.join(cached)}")
        if missing:
            lines.append(f"    {style('Missing:', ANSI_YELLOW)} {', '.join(missing)}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_init(result: InitResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    if not result.created:
        lines = [
            style(f"{WARNING_MARK} Configuration file already exists", ANSI_YELLOW),
            "",
            f"{style('Location:', ANSI_MUTED)} {result.path}",
        ]
        if result.suggestion:
            lines += ["", result.suggestion]
        return "\n".join(lines)

    lines = [
        style(f"{CHECK_MARK} Created {result.path.name}", ANSI_BOLD, ANSI_GREEN),
        "",
        f"{style('Location:', ANSI_MUTED)} {result.path}",
    ]
    if result.recipe:
        lines.append(f"{style('Extends:', ANSI_MUTED)} {style(result.recipe, ANSI_CYAN)} recipe")
    elif result.custom_cache:
        lines.append(style("Cache patterns:", ANSI_MUTED))
        lines.extend(f"  {style('•', ANSI_GREEN)} {pattern}" for pattern in result.custom_cache)
    lines += [
        "",
        style("Edit this file to customize your cache patterns.", ANSI_MUTED),
        style("Run `wtree analyze` to verify your configuration.", ANSI_MUTED),
    ]
    return "\n".join(lines)


def format_doctor(result: DoctorResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    icons = {
        "ok": style(CHECK_MARK, ANSI_GREEN),
        "warning": style(WARNING_MARK, ANSI_YELLOW),
        "error": style(CROSS_MARK, ANSI_RED),
    }
    warnings = result.count("warning")
    if not result.healthy:
        headline = style(f"{CROSS_MARK} Issues found", ANSI_BOLD, ANSI_RED)
    elif warnings:
        headline = style(f"{WARNING_MARK} Healthy with warnings", ANSI_BOLD, ANSI_YELLOW)
    else:
        headline = style(f"{CHECK_MARK} All checks passed", ANSI_BOLD, ANSI_GREEN)

    lines = [
        headline,
        "",
        f"{icons['ok']} {result.count('ok')} passed  {icons['warning']} {warnings} warnings  "
        f"{icons['error']} {result.count('error')} errors",
        "",
    ]
    for check in result.checks:
        lines.append(f"{icons[check.status]} {style(check.name, ANSI_BOLD)}")
        lines.extend(f"  {line}" for line in check.message.splitlines())
        if check.suggestion:
            lines.append(f"  {style(ARROW_MARK, ANSI_CYAN)} {check.suggestion}")
        lines.append("")
    return "\n".join(lines).rstrip()


def format_clean(result: CleanResult, *, color: bool = True) -> str:
    style = Styler(color=color)
    lines: list[str] = []
    if result.dry_run:
        lines += [style(f"{WARNING_MARK} Dry run - no changes made", ANSI_BOLD, ANSI_YELLOW), ""]

    if not result.items and result.pruned == 0:
        lines.append(style(f"{CHECK_MARK} Nothing to clean", ANSI_GREEN))
        return "\n".join(lines)

    lines += [style("Cleanup Summary", ANSI_BOLD), ""]
    if result.items:
        lines.append(f"{style('Items found:', ANSI_MUTED)} {len(result.items)}")
        if result.size:
            lines.append(f"{style('Total size:', ANSI_MUTED)} {format_bytes(result.size)}")
        lines.append("")
        for item in result.items[:CLEAN_PREVIEW_LIMIT]:
            lines.append(f"  {style(str(item.path), ANSI_DIM)}")
            lines.append(f"     {style(item.reason, ANSI_MUTED)}")
        if len(result.items) > CLEAN_PREVIEW_LIMIT:
            lines.append(f"  {style(f'... and {len(result.items) - CLEAN_PREVIEW_LIMIT} more', ANSI_MUTED)}")
        lines.append("")

    if result.pruned:
        verb = "Would prune" if result.dry_run else "Pruned"
        lines.append(f"{style(CHECK_MARK, ANSI_GREEN)} {verb} {result.pruned} stale worktree reference(s)")
    if not result.dry_run and result.cleaned:
        lines.append(f"{style(CHECK_MARK, ANSI_GREEN)} Cleaned {result.cleaned} item(s)")
    elif result.dry_run and result.items:
        lines.append(style(f"{ARROW_MARK} Run without --dry-run to clean these items", ANSI_CYAN))
    return "\n".join(lines)


def format_error(error: WtreeError, *, color: bool = True) -> str:
    style = Styler(color=color)
    return f"{style(f'{CROSS_MARK} Error:', ANSI_RED)} {error.message}"
