"""BackoffRetrier — retries one fallible async operation with exponential backoff."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar

from rpc_batch.retry.domain.classifier import (
    ErrorClassifier,
    MessagePatternClassifier,
    describe_error,
)
from rpc_batch.retry.domain.config import RetryConfig, backoff_delays
from rpc_batch.retry.domain.observer import RetryObserver
from rpc_batch.retry.infrastructure.observer import StructlogRetryObserver

Sleep: TypeAlias = Callable[[float], Awaitable[None]]

T = TypeVar("T")


class BackoffRetrier:
    """Runs an operation, retrying transient failures with clamped exponential delays.

    The retrier holds no state between calls; one instance may wrap any number
    of operations, concurrently. Errors are never wrapped: the caller sees the
    exception raised by the last attempt.
    """

    def __init__(
        self,
        config: RetryConfig,
        observer: RetryObserver,
        classifier: ErrorClassifier | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._config = config
        self._observer = observer
        self._classifier = classifier or MessagePatternClassifier(
            patterns=config.retryable_patterns
        )
        self._sleep = sleep

    @property
    def config(self) -> RetryConfig:
        return self._config

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        operation_name: str = "operation",
    ) -> T:
        """Await ``operation()`` until it succeeds, fails permanently, or attempts run out.

        Raises:
            Exception: whatever the final attempt raised, unchanged.
        """
        max_attempts = self._config.max_retries + 1
        delays = backoff_delays(self._config)

        for attempt in range(1, max_attempts + 1):
            try:
                result = await operation()
            except Exception as exc:
                reason = describe_error(exc)
                transient = self._classifier.is_transient(exc)
                if attempt == max_attempts or not transient:
                    self._observer.retry_failed(
                        operation=operation_name,
                        attempts=attempt,
                        reason=reason,
                        transient=transient,
                    )
                    raise

                delay = next(delays)
                self._observer.retry_scheduled(
                    operation=operation_name,
                    attempt=attempt,
                    reason=reason,
                    delay_seconds=delay,
                )
                await self._sleep(delay)
                continue

            if attempt > 1:
                self._observer.retry_recovered(
                    operation=operation_name, attempts=attempt
                )
            return result

        # range() always yields at least one attempt, and every attempt returns or raises.
        raise AssertionError("unreachable")


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    *,
    classifier: ErrorClassifier | None = None,
    observer: RetryObserver | None = None,
    sleep: Sleep = asyncio.sleep,
    operation_name: str = "operation",
) -> T:
    """Retry ``operation`` with exponential backoff using a one-off BackoffRetrier.

    Defaults to ``RetryConfig()`` (3 retries, 1s initial delay, 10s cap,
    multiplier 2) and structlog logging.
    """
    retrier = BackoffRetrier(
        config=config or RetryConfig(),
        observer=observer or StructlogRetryObserver(),
        classifier=classifier,
        sleep=sleep,
    )
    return await retrier.run(operation, operation_name=operation_name)
