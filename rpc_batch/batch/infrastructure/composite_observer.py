"""CompositeBatchObserver — fans out all events to a list of observers."""

from rpc_batch.batch.domain.observer import BatchObserver


class CompositeBatchObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from BatchObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[BatchObserver]) -> None:
        self._observers = observers

    def batch_started(
        self,
        batch_id: str,
        total_items: int,
        total_chunks: int,
        concurrency: int,
    ) -> None:
        for obs in self._observers:
            obs.batch_started(
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
        for obs in self._observers:
            obs.chunk_started(
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
        for obs in self._observers:
            obs.chunk_completed(
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
        for obs in self._observers:
            obs.batch_completed(
                batch_id=batch_id,
                total_items=total_items,
                elapsed_seconds=elapsed_seconds,
            )

    def batch_failed(self, batch_id: str, chunk_index: int, reason: str) -> None:
        for obs in self._observers:
            obs.batch_failed(batch_id=batch_id, chunk_index=chunk_index, reason=reason)
