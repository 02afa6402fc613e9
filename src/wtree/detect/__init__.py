"""Artifact detection: recipe signatures, gitignore inference and orchestration."""

from __future__ import annotations

from typing import Any

__all__ = [
    "RECIPES",
    "config_for_worktree",
    "detect_config",
    "get_recipe",
    "infer_from_gitignore",
    "lookup_all",
]


def __getattr__(name: str) -> Any:
    """Lazily expose detection APIs to avoid import cycles with ``wtree.config``."""
    if name in {"RECIPES", "get_recipe", "lookup_all"}:
        from . import recipes

        return getattr(recipes, name)
    if name == "infer_from_gitignore":
        from .gitignore import infer_from_gitignore

        return infer_from_gitignore
    if name in {"config_for_worktree", "detect_config"}:
        from . import orchestrator

        return getattr(orchestrator, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
