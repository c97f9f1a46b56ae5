"""BatchRunner — applies an async transform to every item, a bounded chunk at a time."""

import asyncio
import functools
import time
import uuid
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from rpc_batch.batch.domain.config import BatchConfig, chunked
from rpc_batch.batch.domain.observer import BatchObserver
from rpc_batch.batch.infrastructure.observer import StructlogBatchObserver
from rpc_batch.retry.application.retrier import BackoffRetrier
from rpc_batch.retry.domain.classifier import describe_error
from rpc_batch.retry.domain.config import RetryConfig
from rpc_batch.retry.infrastructure.observer import StructlogRetryObserver

T = TypeVar("T")
R = TypeVar("R")


class BatchRunner:
    """Processes items in contiguous chunks of ``concurrency``, one chunk at a time.

    Within a chunk every item is started (in input order) before any is
    awaited, and each invocation goes through the BackoffRetrier. The next
    chunk starts only once the current one has fully settled, so no more than
    ``concurrency`` transforms are ever in flight. A slow item holds
    back its whole chunk.
    """

    def __init__(
        self,
        config: BatchConfig,
        observer: BatchObserver,
        retrier: BackoffRetrier | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._retrier = retrier or BackoffRetrier(
            config=RetryConfig(), observer=StructlogRetryObserver()
        )

    async def run(
        self,
        items: Sequence[T],
        processor: Callable[[T], Awaitable[R]],
    ) -> list[R]:
        """Return ``[processor(item) for item in items]``, aligned with input order.

        All-or-nothing: if any item ultimately fails, its error is raised
        unwrapped, the rest of its chunk is cancelled, and no results are
        returned. When several items of a chunk fail, the first failure wins.
        """
        batch_id = str(uuid.uuid4())
        concurrency = self._config.concurrency
        chunks = list(chunked(items, size=concurrency))

        self._observer.batch_started(
            batch_id=batch_id,
            total_items=len(items),
            total_chunks=len(chunks),
            concurrency=concurrency,
        )
        started_at = time.monotonic()

        results: list[R] = []
        for chunk_index, (offset, chunk) in enumerate(chunks):
            self._observer.chunk_started(
                batch_id=batch_id,
                chunk_index=chunk_index,
                offset=offset,
                size=len(chunk),
            )
            try:
                async with asyncio.TaskGroup() as tg:
                    tasks = [
                        tg.create_task(
                            self._retrier.run(
                                functools.partial(processor, item),
                                operation_name=f"item[{offset + position}]",
                            )
                        )
                        for position, item in enumerate(chunk)
                    ]
            except* Exception as eg:
                error = eg.exceptions[0]
                self._observer.batch_failed(
                    batch_id=batch_id,
                    chunk_index=chunk_index,
                    reason=describe_error(error),
                )
                raise error

            # Tasks were created in input order, so their results line up.
            results.extend(task.result() for task in tasks)
            self._observer.chunk_completed(
                batch_id=batch_id,
                chunk_index=chunk_index,
                completed_items=len(chunk),
            )

        self._observer.batch_completed(
            batch_id=batch_id,
            total_items=len(results),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return results


async def batch_process(
    items: Sequence[T],
    processor: Callable[[T], Awaitable[R]],
    concurrency: int = 10,
    *,
    retrier: BackoffRetrier | None = None,
    observer: BatchObserver | None = None,
) -> list[R]:
    """Run ``processor`` over ``items`` with at most ``concurrency`` in flight.

    Each invocation is retried with the default RetryConfig unless a
    ``retrier`` is supplied.

    Raises:
        pydantic.ValidationError: if ``concurrency`` is not a positive integer.
        Exception: the first item error that survived its retries, unwrapped.
    """
    runner = BatchRunner(
        config=BatchConfig(concurrency=concurrency),
        observer=observer or StructlogBatchObserver(),
        retrier=retrier,
    )
    return await runner.run(items, processor)
