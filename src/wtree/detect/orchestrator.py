"""Three-tier artifact detection for a worktree root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from wtree.config.loader import load_config
from wtree.constants.config import CONFIG_FILENAME, GITIGNORE_FILENAME
from wtree.detect.gitignore import infer_from_gitignore
from wtree.detect.recipes import lookup_all, matched_markers
from wtree.model import DetectionResult
from wtree.types import CacheConfig, DetectionMethod

logger = logging.getLogger(__name__)


def detect_config(root: Path) -> DetectionResult:
    """Resolve the cache configuration for ``root``.

    Tiers are tried in strict order and the first that yields a configuration
    wins: an explicit ``.wtree.yaml``, then built-in recipe signatures, then
    ``.gitignore`` inference. A broken explicit file raises ``ConfigError``
    rather than falling through to the later tiers.
    """
    config_path = root / CONFIG_FILENAME
    if config_path.is_file():
        config = load_config(config_path)
        logger.debug("Using explicit config %s", config_path)
        return DetectionResult(
            method=DetectionMethod.EXPLICIT,
            config=config,
            detected_files=(CONFIG_FILENAME,),
        )

    entries = _root_file_names(root)
    recipes = lookup_all(entries)
    if recipes:
        markers = tuple(marker for recipe in recipes for marker in matched_markers(recipe, entries))
        names = tuple(recipe.name for recipe in recipes)
        logger.debug("Matched recipes %s via %s", ", ".join(names), ", ".join(markers))
        if len(recipes) == 1:
            return DetectionResult(
                method=DetectionMethod.SINGLE_SIGNATURE,
                config=recipes[0].resolved_config(),
                recipes=names,
                detected_files=markers,
            )
        merged = CacheConfig(
            cache=tuple(pattern for recipe in recipes for pattern in recipe.config.cache),
            recipe=names[0],
        )
        return DetectionResult(
            method=DetectionMethod.MERGED_SIGNATURES,
            config=merged,
            recipes=names,
            detected_files=markers,
        )

    inferred = infer_from_gitignore(root)
    if inferred is not None:
        return DetectionResult(method=DetectionMethod.GITIGNORE, config=inferred, detected_files=(GITIGNORE_FILENAME,))

    return DetectionResult(method=DetectionMethod.NONE)


def config_for_worktree(path: Path) -> CacheConfig | None:
    return detect_config(path).config


def _root_file_names(root: Path) -> frozenset[str]:
    """Names of regular files directly under ``root``; empty when unreadable."""
    try:
        with os.scandir(root) as entries:
            return frozenset(entry.name for entry in entries if entry.is_file())
    except OSError as exc:
        logger.warning("Could not list %s: %s", root, exc)
        return frozenset()
