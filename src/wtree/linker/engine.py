"""Artifact copy engine: plan, link or clone each item, then run post-restore."""

from __future__ import annotations

import logging
import os
import shutil
import sys
import tempfile
from collections.abc import Iterable
from pathlib import Path

from wtree.constants.linking import PROGRESS_DONE_LABEL, REFLINK_PLATFORM, STAGING_PREFIX
from wtree.exceptions import CopyError
from wtree.linker.globbing import plan_copies
from wtree.linker.hardlink import hardlink_tree
from wtree.linker.post_restore import run_post_restore
from wtree.linker.reflink import clone_path, probe_reflink
from wtree.model import CopyResult
from wtree.types import CacheConfig, ProgressCallback

logger = logging.getLogger(__name__)


class ArtifactLinker:
    """Links cached artifacts from one worktree into another.

    Copy-on-write cloning is attempted only on macOS and only after a probe
    succeeds; the probe runs at most once per linker. Every other case, and
    any failed clone, falls back to hardlinking.
    """

    def __init__(self, *, use_reflink: bool = True, platform: str = sys.platform) -> None:
        self.use_reflink = use_reflink
        self.platform = platform
        self._reflink_supported: bool | None = None

    def reflink_supported(self, probe_dir: Path) -> bool:
        if not self.use_reflink or self.platform != REFLINK_PLATFORM:
            return False
        if self._reflink_supported is None:
            self._reflink_supported = probe_reflink(probe_dir)
            logger.debug("Reflink support: %s", self._reflink_supported)
        return self._reflink_supported

    def copy_item(self, source: Path, destination: Path) -> None:
        """Copy one artifact into place through a staging directory.

        The staged copy is renamed onto ``destination`` only once complete,
        so a failure never leaves a partial destination behind.
        """
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            staging = Path(tempfile.mkdtemp(prefix=STAGING_PREFIX, dir=destination.parent))
        except OSError as exc:
            raise CopyError(
                f"Could not prepare {destination.parent}: {exc}", source=source, destination=destination
            ) from exc

        staged = staging / source.name
        try:
            if not (self.reflink_supported(destination.parent) and clone_path(source, staged)):
                if os.path.lexists(staged):
                    _remove(staged)
                hardlink_tree(source, staged)
            os.rename(staged, destination)
        except OSError as exc:
            raise CopyError(f"Could not link {source}: {exc}", source=source, destination=destination) from exc
        finally:
            shutil.rmtree(staging, ignore_errors=True)

    def copy_artifacts(
        self,
        source_root: Path,
        dest_root: Path,
        patterns: Iterable[str],
        *,
        on_progress: ProgressCallback | None = None,
    ) -> CopyResult:
        """Link every path matched by ``patterns`` from ``source_root`` into ``dest_root``.

        Paths already present at the destination are left untouched. A failed
        item is logged and skipped; the remaining items are still attempted.
        """
        patterns = tuple(patterns)
        plan = plan_copies(source_root, patterns)
        total = len(plan)
        copied: list[str] = []

        for index, relative in enumerate(plan):
            if on_progress is not None:
                on_progress(index, total, relative)
            source = source_root / relative
            destination = dest_root / relative
            if not os.path.lexists(source):
                logger.debug("Source %s disappeared, skipping", source)
                continue
            if os.path.lexists(destination):
                logger.debug("Destination %s already exists, skipping", destination)
                continue
            try:
                self.copy_item(source, destination)
            except CopyError as exc:
                logger.warning("Failed to copy %s: %s", relative, exc)
                continue
            copied.append(relative)

        if on_progress is not None:
            on_progress(total, total, PROGRESS_DONE_LABEL)
        return CopyResult(patterns=patterns, attempted=tuple(plan), copied=tuple(copied))

    def restore_artifacts(
        self,
        source_root: Path,
        dest_root: Path,
        config: CacheConfig,
        *,
        on_progress: ProgressCallback | None = None,
        output_to_stderr: bool = False,
    ) -> CopyResult:
        """Copy ``config.cache`` and then run ``config.post_restore`` in ``dest_root``.

        Raises ``PostRestoreError`` when the command fails; linked artifacts stay in place.
        """
        result = self.copy_artifacts(source_root, dest_root, config.cache, on_progress=on_progress)
        if config.post_restore:
            run_post_restore(config.post_restore, dest_root, output_to_stderr=output_to_stderr)
        return result


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
