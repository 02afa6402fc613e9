"""CLI entrypoint for wtree."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from wtree import __version__
from wtree.commands import add, analyze, clean, doctor, init, list_worktrees, remove, restore
from wtree.constants.branding import CLI_DESCRIPTION, CLI_EPILOG, PROGRAM_NAME
from wtree.constants.cli import ENV_NO_COLOR, EXIT_FAILURE, EXIT_OK, EXIT_USAGE_ERROR
from wtree.exceptions import ConfigError, InvalidArgumentsError, WtreeError
from wtree.linker import ArtifactLinker
from wtree.model import DoctorResult
from wtree.reporting import ProgressTracker, render_json, should_show_progress
from wtree.reporting import stdout as formatters
from wtree.vcs import GitClient

logger = logging.getLogger(__name__)

_FORMATTERS = {
    "add": formatters.format_add,
    "restore": formatters.format_restore,
    "analyze": formatters.format_analyze,
    "remove": formatters.format_remove,
    "list": formatters.format_list,
    "init": formatters.format_init,
    "doctor": formatters.format_doctor,
    "clean": formatters.format_clean,
}


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--json", action="store_true", help="Print machine-readable JSON on stdout")
    common.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    common.add_argument("--no-reflinks", action="store_true", help="Always hardlink, never clone copy-on-write")
    common.add_argument("--no-color", action="store_true", help="Disable colored output")
    common.add_argument("-v", "--verbose", action="store_true", help="Show debug logging on stderr")
    return common


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description=CLI_DESCRIPTION,
        epilog=CLI_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)
    common = _common_options()

    add_cmd = subparsers.add_parser("add", parents=[common], help="Create a worktree with cached artifacts")
    add_cmd.add_argument("path", type=Path, help="Where to create the worktree")
    add_cmd.add_argument("branch", nargs="?", default=None, help="Existing branch to check out")
    add_cmd.add_argument("-b", dest="new_branch", default=None, help="Create a new branch with this name")
    add_cmd.add_argument("--from", dest="from_branch", default=None, help="Branch of the worktree to copy from")

    restore_cmd = subparsers.add_parser("restore", parents=[common], help="Restore artifacts into a worktree")
    restore_cmd.add_argument("path", type=Path, help="Worktree to restore into")
    restore_cmd.add_argument("--from", dest="from_branch", default=None, help="Branch of the worktree to copy from")

    subparsers.add_parser("analyze", parents=[common], help="Show the detected artifact configuration")

    remove_cmd = subparsers.add_parser("remove", parents=[common], help="Remove a worktree by path or branch")
    remove_cmd.add_argument("target", help="Worktree path or branch name")
    remove_cmd.add_argument("-f", "--force", action="store_true", help="Remove even with uncommitted changes")

    subparsers.add_parser("list", parents=[common], help="List worktrees and their artifact status")
    subparsers.add_parser("init", parents=[common], help="Generate a .wtree.yaml configuration")
    subparsers.add_parser("doctor", parents=[common], help="Diagnose common setup problems")

    clean_cmd = subparsers.add_parser("clean", parents=[common], help="Remove empty caches and stale worktrees")
    clean_cmd.add_argument("-n", "--dry-run", action="store_true", help="Report without deleting anything")

    return parser


def _use_color(args: argparse.Namespace) -> bool:
    return not args.no_color and ENV_NO_COLOR not in os.environ and sys.stdout.isatty()


def _run_command(args: argparse.Namespace, *, color: bool) -> object:
    git = GitClient()
    linker = ArtifactLinker(use_reflink=not args.no_reflinks)
    progress = ProgressTracker(
        "copying artifacts",
        enabled=should_show_progress(json_output=args.json, no_progress=args.no_progress),
        color=color,
    )
    with progress:
        return _dispatch(args, git=git, linker=linker, progress=progress)


def _dispatch(args: argparse.Namespace, *, git: GitClient, linker: ArtifactLinker, progress: ProgressTracker) -> object:
    if args.command == "add":
        if args.branch and args.new_branch:
            raise InvalidArgumentsError("Pass either an existing branch or -b <new-branch>, not both")
        return add(
            path=args.path,
            git=git,
            linker=linker,
            branch=args.branch,
            new_branch=args.new_branch,
            from_branch=args.from_branch,
            on_progress=progress,
            output_to_stderr=args.json,
        )
    if args.command == "restore":
        return restore(
            path=args.path,
            git=git,
            linker=linker,
            from_branch=args.from_branch,
            on_progress=progress,
            output_to_stderr=args.json,
        )
    if args.command == "analyze":
        return analyze(git=git)
    if args.command == "remove":
        return remove(target=args.target, git=git, force=args.force)
    if args.command == "list":
        return list_worktrees(git=git)
    if args.command == "init":
        return init(git=git)
    if args.command == "doctor":
        return doctor(git=git)
    if args.command == "clean":
        return clean(git=git, dry_run=args.dry_run)
    raise InvalidArgumentsError(f"Unsupported command: {args.command}")


def _report_error(exc: WtreeError, *, json_output: bool, color: bool) -> None:
    if json_output:
        print(render_json(exc.to_dict()))
    else:
        print(formatters.format_error(exc, color=color), file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )
    color = _use_color(args)

    try:
        result = _run_command(args, color=color)
    except (ConfigError, InvalidArgumentsError) as exc:
        _report_error(exc, json_output=args.json, color=color)
        return EXIT_USAGE_ERROR
    except WtreeError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _report_error(exc, json_output=args.json, color=color)
        return EXIT_FAILURE

    if args.json:
        print(render_json(result.to_dict()))  # type: ignore[attr-defined]
    else:
        print(_FORMATTERS[args.command](result, color=color))  # type: ignore[operator]

    if isinstance(result, DoctorResult) and not result.healthy:
        return EXIT_FAILURE
    return EXIT_OK
