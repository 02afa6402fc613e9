"""Detection result model."""

from __future__ import annotations

from dataclasses import dataclass

from wtree.types import CacheConfig, DetectionMethod


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of running the three-tier detection against one worktree root."""

    method: DetectionMethod
    config: CacheConfig | None = None
    recipes: tuple[str, ...] = ()
    detected_files: tuple[str, ...] = ()

    @property
    def recipe(self) -> str | None:
        """Primary recipe name: the first match, or the recipe an explicit file extends."""
        if self.recipes:
            return self.recipes[0]
        if self.config is not None:
            return self.config.recipe
        return None

    @property
    def cache_patterns(self) -> tuple[str, ...]:
        return self.config.cache if self.config is not None else ()

    def recipe_fields(self) -> dict[str, object]:
        """Return the ``recipe``/``recipes`` keys shared by several command payloads."""
        fields: dict[str, object] = {}
        if self.recipe is not None:
            fields["recipe"] = self.recipe
        if len(self.recipes) > 1:
            fields["recipes"] = list(self.recipes)
        return fields

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"method": str(self.method), **self.recipe_fields()}
        payload["cache"] = list(self.cache_patterns)
        if self.config is not None and self.config.post_restore is not None:
            payload["post_restore"] = self.config.post_restore
        return payload
