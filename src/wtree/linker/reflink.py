"""Copy-on-write clones through ``cp -c`` on APFS."""

from __future__ import annotations

import logging
import subprocess
import tempfile
from pathlib import Path

from wtree.constants.linking import (
    REFLINK_CLONE_COMMAND,
    REFLINK_PROBE_COMMAND,
    REFLINK_PROBE_CONTENT,
    REFLINK_PROBE_PREFIX,
)

logger = logging.getLogger(__name__)


def probe_reflink(directory: Path) -> bool:
    """Return whether a file inside ``directory`` can be cloned copy-on-write."""
    try:
        with tempfile.TemporaryDirectory(prefix=REFLINK_PROBE_PREFIX, dir=directory) as tmp:
            probe = Path(tmp) / "probe"
            probe.write_bytes(REFLINK_PROBE_CONTENT)
            result = subprocess.run(
                [*REFLINK_PROBE_COMMAND, str(probe), str(probe.with_name("clone"))],
                capture_output=True,
                check=False,
            )
    except OSError as exc:
        logger.debug("Reflink probe in %s failed: %s", directory, exc)
        return False
    return result.returncode == 0


def clone_path(source: Path, destination: Path) -> bool:
    """Clone ``source`` to ``destination``; ``False`` when the clone did not succeed."""
    try:
        result = subprocess.run(
            [*REFLINK_CLONE_COMMAND, str(source), str(destination)],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.debug("Reflink clone of %s failed: %s", source, exc)
        return False
    if result.returncode != 0:
        logger.debug("Reflink clone of %s failed: %s", source, result.stderr.strip())
        return False
    return True
