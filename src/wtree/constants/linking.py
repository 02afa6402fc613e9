"""Constants for artifact expansion, staging and copy-on-write cloning."""

from __future__ import annotations

GLOB_CHARS: frozenset[str] = frozenset("*?[")
PATH_SEPARATOR: str = "/"

STAGING_PREFIX: str = ".wtree-staging-"
REFLINK_PROBE_PREFIX: str = ".wtree_reflink_test_"
REFLINK_PROBE_CONTENT: bytes = b"test"

# Copy-on-write clones are only attempted where ``cp -c`` clones files (APFS).
REFLINK_PLATFORM: str = "darwin"
REFLINK_CLONE_COMMAND: tuple[str, ...] = ("cp", "-cR")
REFLINK_PROBE_COMMAND: tuple[str, ...] = ("cp", "-c")

PROGRESS_DONE_LABEL: str = "done"
