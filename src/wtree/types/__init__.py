"""Shared types for wtree."""

from .common import DetectionMethod, ProgressCallback
from .config import CacheConfig, Recipe, dedupe_patterns
from .vcs import Worktree

__all__ = [
    "CacheConfig",
    "DetectionMethod",
    "ProgressCallback",
    "Recipe",
    "Worktree",
    "dedupe_patterns",
]
