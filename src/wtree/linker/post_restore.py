"""Running the post-restore command inside a freshly linked worktree."""

from __future__ import annotations

import logging
import subprocess
import sys
from pathlib import Path

from wtree.exceptions import PostRestoreError

logger = logging.getLogger(__name__)


def run_post_restore(command: str, cwd: Path, *, output_to_stderr: bool = False) -> None:
    """Run ``command`` through the shell in ``cwd`` with output streamed live.

    With ``output_to_stderr`` the command's stdout is sent to stderr so that
    machine-readable output on stdout stays clean.
    """
    logger.info("Running post-restore command in %s: %s", cwd, command)
    sys.stdout.flush()
    result = subprocess.run(
        command,
        shell=True,
        cwd=cwd,
        stdout=sys.stderr if output_to_stderr else None,
        check=False,
    )
    if result.returncode != 0:
        raise PostRestoreError(command, result.returncode)
