"""Built-in stack signature registry.

Each recipe maps one or more marker files found at a worktree root to the
artifact patterns worth linking into a fresh worktree. Registry order is
significant: merged detections list patterns and recipe names in this order.
"""

from __future__ import annotations

from collections.abc import Collection

from wtree.types import CacheConfig, Recipe


def _recipe(name: str, detect: tuple[str, ...], cache: tuple[str, ...]) -> Recipe:
    return Recipe(name=name, detect=detect, config=CacheConfig(cache=cache))


RECIPES: tuple[Recipe, ...] = (
    _recipe("turborepo", ("turbo.json",), ("node_modules", ".turbo", "**/node_modules")),
    _recipe("nx", ("nx.json",), ("node_modules", ".nx/cache", "**/node_modules")),
    _recipe("rush", ("rush.json",), ("common/temp/node_modules", ".rush/temp")),
    _recipe("pnpm-workspaces", ("pnpm-workspace.yaml",), ("node_modules", "**/node_modules")),
    _recipe("pnpm", ("pnpm-lock.yaml",), ("node_modules",)),
    _recipe("npm", ("package-lock.json",), ("node_modules",)),
    _recipe("yarn", ("yarn.lock",), ("node_modules", ".yarn/cache")),
    _recipe("bun", ("bun.lock", "bun.lockb"), ("node_modules",)),
    _recipe("python-uv", ("uv.lock",), (".venv",)),
    _recipe("python-pip", ("requirements.txt",), (".venv",)),
    _recipe("rust", ("Cargo.lock",), ("target",)),
    _recipe("go", ("go.sum",), ("vendor",)),
)

_RECIPES_BY_NAME: dict[str, Recipe] = {recipe.name: recipe for recipe in RECIPES}


def matched_markers(recipe: Recipe, root_entries: Collection[str]) -> tuple[str, ...]:
    """Return the recipe's markers present in ``root_entries``, in marker order."""
    return tuple(marker for marker in recipe.detect if marker in root_entries)


def lookup_all(root_entries: Collection[str]) -> list[Recipe]:
    """Return every recipe with at least one marker in ``root_entries``, in registry order."""
    return [recipe for recipe in RECIPES if matched_markers(recipe, root_entries)]


def get_recipe(name: str) -> Recipe | None:
    return _RECIPES_BY_NAME.get(name)


def recipe_names() -> tuple[str, ...]:
    return tuple(_RECIPES_BY_NAME)
