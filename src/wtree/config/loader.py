"""Loading and merging of ``.wtree.yaml`` files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from wtree.constants.config import CONFIG_KEY_CACHE, CONFIG_KEY_EXTENDS, CONFIG_KEY_POST_RESTORE
from wtree.detect.recipes import get_recipe
from wtree.exceptions import ConfigError, UnknownRecipeError
from wtree.types import CacheConfig


def load_config(path: Path) -> CacheConfig:
    """Load an explicit configuration file and merge it over the recipe it extends.

    ``cache`` entries are appended to the recipe's patterns (duplicates dropped),
    while ``post_restore`` replaces the recipe's command. Unknown keys are ignored.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Could not read config file at {path}: {exc}") from exc

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    base = CacheConfig()
    extends = raw.get(CONFIG_KEY_EXTENDS)
    if extends is not None:
        if not isinstance(extends, str):
            raise UnknownRecipeError(repr(extends))
        recipe = get_recipe(extends)
        if recipe is None:
            raise UnknownRecipeError(extends)
        base = recipe.resolved_config()

    cache = _ensure_string_list(raw.get(CONFIG_KEY_CACHE), CONFIG_KEY_CACHE)

    post_restore = raw.get(CONFIG_KEY_POST_RESTORE)
    if post_restore is not None and not isinstance(post_restore, str):
        raise ConfigError(f"{CONFIG_KEY_POST_RESTORE} must be a string")

    return CacheConfig(
        cache=(*base.cache, *cache),
        post_restore=post_restore if post_restore is not None else base.post_restore,
        recipe=base.recipe,
    )


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)
