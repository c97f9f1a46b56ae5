"""StructlogRetryObserver — production observer that delegates to structlog."""

import structlog


class StructlogRetryObserver:
    """Logs retry domain events to structlog.

    Does NOT inherit from RetryObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def retry_scheduled(
        self,
        operation: str,
        attempt: int,
        reason: str,
        delay_seconds: float,
    ) -> None:
        self._log.warning(
            "retry.scheduled",
            operation=operation,
            attempt=attempt,
            reason=reason,
            delay_seconds=delay_seconds,
        )

    def retry_recovered(self, operation: str, attempts: int) -> None:
        self._log.info("retry.recovered", operation=operation, attempts=attempts)

    def retry_failed(
        self,
        operation: str,
        attempts: int,
        reason: str,
        transient: bool,
    ) -> None:
        self._log.error(
            "retry.failed",
            operation=operation,
            attempts=attempts,
            reason=reason,
            transient=transient,
        )
