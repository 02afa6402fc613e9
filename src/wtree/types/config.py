"""Typed configuration structures for artifact caching."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


def dedupe_patterns(patterns: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicate patterns, keeping first-insertion order."""
    return tuple(dict.fromkeys(patterns))


@dataclass(frozen=True)
class CacheConfig:
    """Resolved artifact configuration for one worktree.

    ``cache`` holds glob patterns relative to the worktree root and never
    contains the same literal twice.
    """

    cache: tuple[str, ...] = ()
    post_restore: str | None = None
    recipe: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "cache", dedupe_patterns(self.cache))

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"cache": list(self.cache)}
        if self.post_restore is not None:
            payload["post_restore"] = self.post_restore
        if self.recipe is not None:
            payload["recipe"] = self.recipe
        return payload


@dataclass(frozen=True)
class Recipe:
    """Built-in project signature: marker files mapped to a cache configuration."""

    name: str
    detect: tuple[str, ...]
    config: CacheConfig

    def resolved_config(self) -> CacheConfig:
        """Return this recipe's configuration tagged with the recipe name."""
        return CacheConfig(cache=self.config.cache, post_restore=self.config.post_restore, recipe=self.name)
