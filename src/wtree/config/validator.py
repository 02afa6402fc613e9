"""Collect-all validation of ``.wtree.yaml`` files."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from wtree.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    CONFIG_KEY_CACHE,
    CONFIG_KEY_EXTENDS,
    CONFIG_KEY_POST_RESTORE,
)
from wtree.constants.validation import CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, SUGGESTION_CUTOFF
from wtree.detect.recipes import get_recipe, recipe_names
from wtree.exceptions.validation import ValidationError, sort_errors


def validate_config_file(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Validate a ``.wtree.yaml`` file and return every problem found.

    A missing default file is not an error (detection simply falls through);
    a missing explicit ``config_path`` is reported as ``CFG001``. Never raises.
    """
    errors: list[ValidationError] = []
    path = config_path if config_path is not None else root / CONFIG_FILENAME
    path_str = str(path)

    if not path.is_file():
        if config_path is not None:
            errors.append(
                ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as exc:
        errors.append(ValidationError(code=CFG002, path=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    extends = raw.get(CONFIG_KEY_EXTENDS)
    if extends is not None:
        if not isinstance(extends, str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=CONFIG_KEY_EXTENDS,
                    message=f"invalid type for `{CONFIG_KEY_EXTENDS}`",
                    hint="expected a recipe name",
                )
            )
        elif get_recipe(extends) is None:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=CONFIG_KEY_EXTENDS,
                    message=f"unknown recipe `{extends}`",
                    hint=f"expected one of: {', '.join(recipe_names())}",
                )
            )

    cache = raw.get(CONFIG_KEY_CACHE)
    if cache is not None and (not isinstance(cache, list) or not all(isinstance(item, str) for item in cache)):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=CONFIG_KEY_CACHE,
                message=f"invalid type for `{CONFIG_KEY_CACHE}`",
                hint="expected a list of strings",
            )
        )

    post_restore = raw.get(CONFIG_KEY_POST_RESTORE)
    if post_restore is not None and not isinstance(post_restore, str):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=CONFIG_KEY_POST_RESTORE,
                message=f"invalid type for `{CONFIG_KEY_POST_RESTORE}`",
                hint="expected a shell command string",
            )
        )

    return sort_errors(errors)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=SUGGESTION_CUTOFF)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
