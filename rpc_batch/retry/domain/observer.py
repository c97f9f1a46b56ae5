"""Observer port for the retry domain — defines events in domain language."""

from typing import Protocol


class RetryObserver(Protocol):
    """Observer port emitting structured events while an operation is retried.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def retry_scheduled(
        self,
        operation: str,
        attempt: int,
        reason: str,
        delay_seconds: float,
    ) -> None: ...

    def retry_recovered(self, operation: str, attempts: int) -> None: ...

    def retry_failed(
        self,
        operation: str,
        attempts: int,
        reason: str,
        transient: bool,
    ) -> None: ...
