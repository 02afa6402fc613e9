"""Result records returned by wtree commands.

Every result exposes ``to_dict()`` producing the payload printed by ``--json``;
the human-readable formatters in ``wtree.reporting.stdout`` read the same objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from wtree.constants.linking import GLOB_CHARS
from wtree.model.artifacts import CopyResult
from wtree.model.detection import DetectionResult
from wtree.types import CacheConfig, Worktree

type CheckStatus = Literal["ok", "warning", "error"]
type CleanItemKind = Literal["file", "directory", "worktree"]


def _with_warning(payload: dict[str, object], warning: str | None) -> dict[str, object]:
    if warning:
        payload["warning"] = warning
    return payload


@dataclass(frozen=True)
class AddResult:
    worktree: Worktree
    source: Worktree
    artifacts: CopyResult
    detection: DetectionResult
    warning: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "success": True,
            "worktree": self.worktree.to_dict(),
            "source": self.source.to_dict(),
            "artifacts": self.artifacts.to_dict(),
            **self.detection.recipe_fields(),
        }
        return _with_warning(payload, self.warning)


@dataclass(frozen=True)
class RestoreResult:
    target: Path
    source: Worktree
    artifacts: CopyResult
    detection: DetectionResult
    warning: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "success": True,
            "target": {"path": str(self.target)},
            "source": self.source.to_dict(),
            "artifacts": self.artifacts.to_dict(),
            **self.detection.recipe_fields(),
        }
        return _with_warning(payload, self.warning)


@dataclass(frozen=True)
class AnalyzeResult:
    root: Path
    detection: DetectionResult

    def to_dict(self) -> dict[str, object]:
        detection = self.detection
        payload: dict[str, object] = {
            "success": True,
            "detection": {"method": str(detection.method), **detection.recipe_fields()},
            "config": detection.config.to_dict() if detection.config is not None else None,
        }
        if detection.detected_files:
            payload["files"] = {"detected": list(detection.detected_files)}
        return payload


@dataclass(frozen=True)
class RemoveResult:
    removed: Worktree

    def to_dict(self) -> dict[str, object]:
        return {"success": True, "removed": self.removed.to_dict()}


@dataclass(frozen=True)
class ArtifactStatus:
    pattern: str
    exists: bool

    @property
    def is_glob(self) -> bool:
        return any(char in GLOB_CHARS for char in self.pattern)


@dataclass(frozen=True)
class WorktreeListing:
    worktree: Worktree
    current: bool
    detection: DetectionResult
    artifacts: tuple[ArtifactStatus, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            **self.worktree.to_dict(),
            "current": self.current,
            **self.detection.recipe_fields(),
            "artifacts": [{"pattern": a.pattern, "exists": a.exists} for a in self.artifacts],
        }


@dataclass(frozen=True)
class ListResult:
    worktrees: tuple[WorktreeListing, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {"success": True, "worktrees": [entry.to_dict() for entry in self.worktrees]}


@dataclass(frozen=True)
class InitResult:
    created: bool
    path: Path
    message: str | None = None
    suggestion: str | None = None
    recipe: str | None = None
    custom_cache: tuple[str, ...] = ()
    config: CacheConfig | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"success": True, "created": self.created, "path": str(self.path)}
        if self.message:
            payload["message"] = self.message
        if self.suggestion:
            payload["suggestion"] = self.suggestion
        if self.recipe:
            payload["recipe"] = self.recipe
        if self.custom_cache:
            payload["customCache"] = list(self.custom_cache)
        if self.config is not None:
            payload["config"] = self.config.to_dict()
        return payload


@dataclass(frozen=True)
class DoctorCheck:
    name: str
    status: CheckStatus
    message: str
    suggestion: str | None = None

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"name": self.name, "status": self.status, "message": self.message}
        if self.suggestion:
            payload["suggestion"] = self.suggestion
        return payload


@dataclass(frozen=True)
class DoctorResult:
    checks: tuple[DoctorCheck, ...] = ()

    def count(self, status: CheckStatus) -> int:
        return sum(1 for check in self.checks if check.status == status)

    @property
    def healthy(self) -> bool:
        return self.count("error") == 0

    def to_dict(self) -> dict[str, object]:
        return {
            "success": True,
            "healthy": self.healthy,
            "checks": [check.to_dict() for check in self.checks],
            "summary": {
                "total": len(self.checks),
                "ok": self.count("ok"),
                "warnings": self.count("warning"),
                "errors": self.count("error"),
            },
        }


@dataclass(frozen=True)
class CleanItem:
    kind: CleanItemKind
    path: Path
    reason: str
    size: int = 0


@dataclass(frozen=True)
class CleanResult:
    dry_run: bool
    items: tuple[CleanItem, ...] = field(default_factory=tuple)
    cleaned: int = 0
    pruned: int = 0

    @property
    def size(self) -> int:
        return sum(item.size for item in self.items)

    def to_dict(self) -> dict[str, object]:
        return {
            "success": True,
            "dryRun": self.dry_run,
            "items": [{"type": item.kind, "path": str(item.path), "reason": item.reason} for item in self.items],
            "summary": {
                "total": len(self.items),
                "cleaned": self.cleaned,
                "pruned": self.pruned,
                "size": self.size,
            },
        }
