"""Git worktree records."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Worktree:
    """Snapshot of one entry from ``git worktree list``."""

    path: Path
    branch: str
    bare: bool = False
    is_main: bool = False

    def to_dict(self) -> dict[str, object]:
        return {"path": str(self.path), "branch": self.branch}
