"""Structlog implementation of the RequestsObserver port."""

import structlog


class StructlogRequestsObserver:
    """Delegates request-loading events to structlog.

    Satisfies the RequestsObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def requests_loading_started(self, path: str) -> None:
        self._log.info("requests.loading_started", path=path)

    def requests_loading_completed(self, path: str, total_requests: int) -> None:
        self._log.info(
            "requests.loading_completed",
            path=path,
            total_requests=total_requests,
        )

    def requests_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("requests.loading_failed", path=path, reason=reason)
