"""Observer port for loading RPC request files."""

from typing import Protocol


class RequestsObserver(Protocol):
    def requests_loading_started(self, path: str) -> None: ...

    def requests_loading_completed(self, path: str, total_requests: int) -> None: ...

    def requests_loading_failed(self, path: str, reason: str) -> None: ...
