"""Progress bar for artifact copies, rendered with rich on stderr."""

from __future__ import annotations

import os
import sys
from types import TracebackType
from typing import TextIO

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TaskID, TextColumn, TimeElapsedColumn

from wtree.constants.cli import ENV_CI
from wtree.constants.reporting import PROGRESS_BAR_WIDTH, PROGRESS_MESSAGE_WIDTH


def should_show_progress(*, json_output: bool, no_progress: bool, stream: TextIO | None = None) -> bool:
    """Progress is shown only for interactive, non-JSON, non-CI runs."""
    if json_output or no_progress or os.environ.get(ENV_CI):
        return False
    stream = stream if stream is not None else sys.stderr
    return stream.isatty()


class ProgressTracker:
    """Progress callback for the copy engine; every method is a no-op when disabled.

    The bar starts on the first call and is closed by the call whose
    ``current`` reaches ``total``.
    """

    def __init__(
        self,
        label: str,
        *,
        enabled: bool,
        color: bool = True,
        console: Console | None = None,
    ) -> None:
        self.label = label
        self.enabled = enabled
        self.console = console if console is not None else Console(stderr=True, no_color=not color)
        self._progress: Progress | None = None
        self._task: TaskID | None = None
        self.finished = False

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def _describe(self, message: str) -> str:
        if not message:
            return self.label
        return f"{self.label} - {message[:PROGRESS_MESSAGE_WIDTH]}"

    def _start(self, total: int) -> Progress:
        if self._progress is None:
            self._progress = Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(bar_width=PROGRESS_BAR_WIDTH),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
            )
            self._progress.start()
            self._task = self._progress.add_task(self.label, total=total)
        return self._progress

    def update(self, current: int, total: int, message: str = "") -> None:
        if not self.enabled or self.finished:
            return
        progress = self._start(total)
        progress.update(self._task, completed=current, total=total, description=self._describe(message))

    def finish(self, total: int) -> None:
        if not self.enabled or self.finished:
            return
        progress = self._start(total)
        progress.update(self._task, completed=total, total=total, description=f"{self.label} {total} item(s)")
        self.close()

    def close(self) -> None:
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
        self.finished = True

    def __call__(self, current: int, total: int, message: str) -> None:
        if current >= total:
            self.finish(total)
        else:
            self.update(current, total, message)
