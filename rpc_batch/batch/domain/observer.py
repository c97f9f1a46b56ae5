"""Observer port for the batch domain — defines events in domain language."""

from typing import Protocol


class BatchObserver(Protocol):
    """Observer port emitting structured events while a batch is processed.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def batch_started(
        self,
        batch_id: str,
        total_items: int,
        total_chunks: int,
        concurrency: int,
    ) -> None: ...

    def chunk_started(
        self,
        batch_id: str,
        chunk_index: int,
        offset: int,
        size: int,
    ) -> None: ...

    def chunk_completed(
        self,
        batch_id: str,
        chunk_index: int,
        completed_items: int,
    ) -> None: ...

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None: ...

    def batch_failed(self, batch_id: str, chunk_index: int, reason: str) -> None: ...
