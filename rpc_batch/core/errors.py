"""Base exception class for all rpc-batch-specific errors."""


class RpcBatchError(Exception):
    """Base class for all rpc-batch errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
