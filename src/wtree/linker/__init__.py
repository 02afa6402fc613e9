"""Artifact linking engine."""

from __future__ import annotations

from wtree.linker.engine import ArtifactLinker
from wtree.linker.globbing import deduplicate_paths, expand_patterns, plan_copies

__all__ = [
    "ArtifactLinker",
    "deduplicate_paths",
    "expand_patterns",
    "plan_copies",
]
