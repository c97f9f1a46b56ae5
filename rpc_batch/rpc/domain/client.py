"""RpcClient Protocol — structural interface for a chain RPC endpoint."""

from typing import Any, Protocol


class RpcClient(Protocol):
    """Sends one RPC request and returns its result, or raises.

    Clients are constructed and closed by the caller and passed explicitly to
    whatever needs them; there is no process-wide instance.
    """

    async def call(self, method: str, params: list[Any]) -> Any: ...
