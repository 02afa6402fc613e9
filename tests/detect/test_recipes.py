"""Tests for the built-in recipe registry."""

from __future__ import annotations

import pytest

from wtree.detect.recipes import RECIPES, get_recipe, lookup_all, matched_markers, recipe_names


def test_registry_order_is_fixed() -> None:
    assert recipe_names() == (
        "turborepo",
        "nx",
        "rush",
        "pnpm-workspaces",
        "pnpm",
        "npm",
        "yarn",
        "bun",
        "python-uv",
        "python-pip",
        "rust",
        "go",
    )


def test_no_builtin_recipe_defines_post_restore() -> None:
    assert all(recipe.config.post_restore is None for recipe in RECIPES)


def test_every_recipe_has_markers_and_patterns() -> None:
    for recipe in RECIPES:
        assert recipe.detect, recipe.name
        assert recipe.config.cache, recipe.name


def test_lookup_all_returns_matches_in_registry_order() -> None:
    matches = lookup_all({"package-lock.json", "Cargo.lock", "README.md"})

    assert [recipe.name for recipe in matches] == ["npm", "rust"]


def test_lookup_all_with_no_markers_is_empty() -> None:
    assert lookup_all({"README.md", "setup.cfg"}) == []
    assert lookup_all(set()) == []


@pytest.mark.parametrize(
    "marker",
    ["bun.lock", "bun.lockb"],
    ids=["text-lockfile", "binary-lockfile"],
)
def test_any_single_marker_matches(marker: str) -> None:
    assert [recipe.name for recipe in lookup_all({marker})] == ["bun"]


def test_matched_markers_follow_recipe_marker_order() -> None:
    bun = get_recipe("bun")
    assert bun is not None

    assert matched_markers(bun, {"bun.lockb", "bun.lock"}) == ("bun.lock", "bun.lockb")
    assert matched_markers(bun, {"bun.lockb"}) == ("bun.lockb",)


def test_marker_lookup_is_exact_match() -> None:
    assert lookup_all({"cargo.lock", "Package-Lock.json"}) == []


def test_get_recipe_returns_none_for_unknown_name() -> None:
    assert get_recipe("maven") is None


def test_resolved_config_carries_recipe_name() -> None:
    turbo = get_recipe("turborepo")
    assert turbo is not None

    config = turbo.resolved_config()

    assert config.recipe == "turborepo"
    assert config.cache == ("node_modules", ".turbo", "**/node_modules")
