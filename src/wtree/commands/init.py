"""``wtree init``: write a starter ``.wtree.yaml``."""

from __future__ import annotations

import tempfile
from contextlib import suppress
from pathlib import Path

import yaml

from wtree.config import validate_config_file
from wtree.constants.config import (
    CONFIG_FILENAME,
    CONFIG_KEY_CACHE,
    CONFIG_KEY_EXTENDS,
    CONFIG_KEY_POST_RESTORE,
    INIT_CONFIG_TEMP_PREFIX,
    INIT_CONFIG_TEMP_SUFFIX,
    TEMPLATE_CACHE_HINTS,
)
from wtree.detect.orchestrator import detect_config
from wtree.detect.recipes import RECIPES, get_recipe
from wtree.exceptions import ConfigError
from wtree.exceptions.validation import format_errors
from wtree.io import write_text_atomic
from wtree.model import InitResult
from wtree.types import DetectionMethod
from wtree.vcs import GitClient

_POST_RESTORE_HINT = f"# Optional: command to run after restoring artifacts\n# {CONFIG_KEY_POST_RESTORE}: npm install\n"


def _dump(payload: dict[str, object]) -> str:
    return yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)


def render_extends_config(recipe_name: str) -> str:
    lines = [
        "# wtree configuration - extends a built-in recipe",
        _dump({CONFIG_KEY_EXTENDS: recipe_name}),
        "# Extra cache patterns, linked in addition to the recipe defaults",
        "# cache:",
        "#   - build",
        "#   - dist",
        "",
        _POST_RESTORE_HINT,
    ]
    recipe = get_recipe(recipe_name)
    if recipe is not None:
        lines.append("# Recipe defaults:")
        lines.extend(f"#   - {pattern}" for pattern in recipe.config.cache)
        lines.append("")
    return "\n".join(lines)


def render_explicit_config(cache: tuple[str, ...]) -> str:
    return "\n".join(
        [
            "# wtree configuration",
            "",
            "# Glob patterns for artifacts to hardlink into new worktrees",
            _dump({CONFIG_KEY_CACHE: list(cache)}),
            _POST_RESTORE_HINT,
        ]
    )


def render_template_config() -> str:
    lines = [
        "# wtree configuration",
        "#",
        "# No project type was detected. Uncomment the patterns that apply,",
        "# or run `wtree analyze` to see what would be detected automatically.",
        "",
        "# Glob patterns for artifacts to hardlink into new worktrees",
        f"{CONFIG_KEY_CACHE}:",
    ]
    for label, patterns in TEMPLATE_CACHE_HINTS:
        lines.append(f"  # {label}")
        lines.extend(f"  # - {pattern}" for pattern in patterns)
    lines += ["", _POST_RESTORE_HINT, "# Or extend a built-in recipe instead:", "# extends: pnpm", "#"]
    lines.append("# Available recipes:")
    lines.extend(f"#   - {recipe.name} ({', '.join(recipe.detect)})" for recipe in RECIPES)
    lines.append("")
    return "\n".join(lines)


def _validate_rendered(root: Path, rendered: str) -> None:
    temp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=root,
            prefix=INIT_CONFIG_TEMP_PREFIX,
            suffix=INIT_CONFIG_TEMP_SUFFIX,
            delete=False,
        ) as handle:
            handle.write(rendered)
            temp_path = Path(handle.name)
        errors = validate_config_file(root, temp_path)
    finally:
        if temp_path is not None:
            with suppress(FileNotFoundError):
                temp_path.unlink()
    if errors:
        raise ConfigError(format_errors(errors))


def init(*, git: GitClient, root: Path | None = None) -> InitResult:
    """Write ``.wtree.yaml`` at the worktree root unless one already exists.

    Recipe detections become ``extends``, gitignore detections become an
    explicit ``cache`` list, and anything else gets a commented template.
    """
    root = root if root is not None else git.worktree_root()
    config_path = root / CONFIG_FILENAME
    if config_path.exists():
        return InitResult(
            created=False,
            path=config_path,
            message="Configuration file already exists",
            suggestion="Use `wtree analyze` to see current configuration",
        )

    detection = detect_config(root)
    recipe_name: str | None = None
    custom_cache: tuple[str, ...] = ()
    if detection.method in (DetectionMethod.SINGLE_SIGNATURE, DetectionMethod.MERGED_SIGNATURES):
        recipe_name = detection.recipe
        rendered = render_extends_config(detection.recipes[0])
    elif detection.config is not None and detection.config.cache:
        custom_cache = detection.config.cache
        rendered = render_explicit_config(custom_cache)
    else:
        rendered = render_template_config()

    _validate_rendered(root, rendered)
    write_text_atomic(
        path=config_path,
        content=rendered,
        temp_prefix=INIT_CONFIG_TEMP_PREFIX,
        temp_suffix=INIT_CONFIG_TEMP_SUFFIX,
        overwrite=False,
    )
    return InitResult(
        created=True,
        path=config_path,
        recipe=recipe_name,
        custom_cache=custom_cache,
        config=detection.config,
    )
