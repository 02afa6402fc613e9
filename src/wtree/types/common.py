"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum


class DetectionMethod(StrEnum):
    """How an artifact configuration was obtained."""

    EXPLICIT = "explicit"
    SINGLE_SIGNATURE = "single-signature"
    MERGED_SIGNATURES = "merged-multi-signature"
    GITIGNORE = "gitignore-inferred"
    NONE = "none"


type ProgressCallback = Callable[[int, int, str], None]
