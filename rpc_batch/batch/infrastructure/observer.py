"""StructlogBatchObserver — production observer that delegates to structlog."""

import structlog


class StructlogBatchObserver:
    """Logs batch domain events to structlog.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def batch_started(
        self,
        batch_id: str,
        total_items: int,
        total_chunks: int,
        concurrency: int,
    ) -> None:
        self._log.info(
            "batch.started",
            batch_id=batch_id,
            total_items=total_items,
            total_chunks=total_chunks,
            concurrency=concurrency,
        )

    def chunk_started(
        self,
        batch_id: str,
        chunk_index: int,
        offset: int,
        size: int,
    ) -> None:
        self._log.debug(
            "batch.chunk.started",
            batch_id=batch_id,
            chunk_index=chunk_index,
            offset=offset,
            size=size,
        )

    def chunk_completed(
        self,
        batch_id: str,
        chunk_index: int,
        completed_items: int,
    ) -> None:
        self._log.info(
            "batch.chunk.completed",
            batch_id=batch_id,
            chunk_index=chunk_index,
            completed_items=completed_items,
        )

    def batch_completed(
        self,
        batch_id: str,
        total_items: int,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "batch.completed",
            batch_id=batch_id,
            total_items=total_items,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def batch_failed(self, batch_id: str, chunk_index: int, reason: str) -> None:
        self._log.error(
            "batch.failed",
            batch_id=batch_id,
            chunk_index=chunk_index,
            reason=reason,
        )
