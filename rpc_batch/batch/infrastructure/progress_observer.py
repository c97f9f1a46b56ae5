"""ProgressBatchObserver — renders a Rich item progress bar to stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


def _make_progress(console: Console) -> Progress:
    """Create a Progress instance with the standard column layout."""
    return Progress(
        TextColumn("{task.description}"),
        BarColumn(bar_width=40),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        TextColumn("[dim]{task.fields[chunk]}[/dim]"),
        console=console,
        refresh_per_second=10,
        transient=False,
    )


class ProgressBatchObserver:
    """Renders one progress bar per batch, advanced as each chunk settles.

    Items are counted done only once their whole chunk has completed, which
    mirrors the runner's all-or-nothing chunk semantics.

    Pass ``disabled=True`` to suppress all terminal output (useful in tests);
    counters are still tracked.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._total_chunks = 0
        self._done = 0
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def done(self) -> int:
        return self._done

    def _chunk_label(self, chunk_index: int) -> str:
        return f"chunk {chunk_index + 1}/{self._total_chunks}"

    def batch_started(
        self,
        batch_id: str,
        total_items: int,
        total_chunks: int,
        concurrency: int,
    ) -> None:
        self._total_chunks = total_chunks
        self._done = 0
        self._progress = None
        self._task_id = None

        if self._disabled:
            return

        self._progress = _make_progress(console=Console(stderr=True))
        self._task_id = self._progress.add_task(
            description=f"[bold]batch {batch_id[:8]}[/bold]",
            total=float(total_items),
            chunk="",
        )
        self._progress.start()

    def chunk_started(
        self,
        batch_id: str,
        chunk_index: int,
        offset: int,
        size: int,
    ) -> None:
        if self._progress is not None and self._task_id is not None:
            self._progress.update(
                self._task_id, chunk=self._chunk_label(chunk_index=chunk_index)
            )

    def chunk_completed(
        self,
        batch_id: str,
        chunk_index: int,
        completed_items: int,
    ) -> None:
        self._done += completed_items
        if self._progress is not None and self._task_id is not None:
            self._progress.update(self._task_id, completed=self._done)

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None:
        self._stop()

    def batch_failed(self, batch_id: str, chunk_index: int, reason: str) -> None:
        self._stop()

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None
