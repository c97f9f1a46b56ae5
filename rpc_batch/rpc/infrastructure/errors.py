"""Error types raised by RPC infrastructure."""

from pathlib import Path

from rpc_batch.core.errors import RpcBatchError


class RpcHttpError(RpcBatchError):
    """Raised when the RPC endpoint answers with an HTTP error status.

    Rate limiting (429) and server errors (5xx) are retriable.
    """

    def __init__(self, method: str, status_code: int, reason_phrase: str) -> None:
        self.method = method
        self.status_code = status_code
        super().__init__(
            f"Failed to call RPC method {method}: HTTP {status_code} {reason_phrase}",
            retriable=status_code == 429 or status_code >= 500,
        )


class RpcTimeoutError(RpcBatchError):
    """Raised when the RPC request exceeds the client timeout."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        super().__init__(
            f"Failed to call RPC method {method}: timeout ({reason})", retriable=True
        )


class RpcTransportError(RpcBatchError):
    """Raised when the RPC endpoint cannot be reached (connection reset, DNS, ...)."""

    def __init__(self, method: str, reason: str) -> None:
        self.method = method
        super().__init__(
            f"Failed to call RPC method {method}: transport error: {reason}",
            retriable=True,
        )


class RpcResponseError(RpcBatchError):
    """Raised for a JSON-RPC error object or a malformed response envelope."""

    def __init__(self, method: str, message: str, code: int | None = None) -> None:
        self.method = method
        self.code = code
        detail = message if code is None else f"[{code}] {message}"
        super().__init__(f"Failed to call RPC method {method}: {detail}")


class RequestLoadError(RpcBatchError):
    """Raised when a JSONL requests file cannot be loaded or is malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load requests from {path}: {reason}")
