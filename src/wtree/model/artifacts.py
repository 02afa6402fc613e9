"""Models for copy results and source selection."""

from __future__ import annotations

from dataclasses import dataclass

from wtree.types import Worktree


@dataclass(frozen=True)
class CopyResult:
    """Result of one ``copy_artifacts`` call.

    ``attempted`` is the de-duplicated plan in copy order; ``copied`` is the
    subset that was actually linked, in the same relative order.
    """

    patterns: tuple[str, ...] = ()
    attempted: tuple[str, ...] = ()
    copied: tuple[str, ...] = ()

    @property
    def skipped(self) -> tuple[str, ...]:
        copied = set(self.copied)
        return tuple(path for path in self.attempted if path not in copied)

    def to_dict(self) -> dict[str, object]:
        return {"patterns": list(self.patterns), "copied": list(self.copied)}


@dataclass(frozen=True)
class SourceSelection:
    """Worktree chosen as the artifact source, plus a warning when the choice was a guess."""

    worktree: Worktree
    source: str
    warning: str | None = None
