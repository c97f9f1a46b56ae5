"""JsonRpcClient — async JSON-RPC 2.0 over HTTP, backed by httpx."""

import itertools
from types import TracebackType
from typing import Any, Self

import httpx
from pydantic import BaseModel, ValidationError

from rpc_batch.rpc.infrastructure.errors import (
    RpcHttpError,
    RpcResponseError,
    RpcTimeoutError,
    RpcTransportError,
)


class _JsonRpcErrorObject(BaseModel):
    code: int
    message: str


class _JsonRpcEnvelope(BaseModel):
    """Only the fields this client reads; anything else in the response is ignored."""

    jsonrpc: str
    result: Any = None
    error: _JsonRpcErrorObject | None = None


class JsonRpcClient:
    """Sends JSON-RPC requests to a single endpoint.

    Owns its httpx.AsyncClient unless one is passed in. Use as an async
    context manager, or call ``aclose()`` when done.

    Satisfies the RpcClient protocol structurally.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout_seconds)
        self._ids = itertools.count(1)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    async def call(self, method: str, params: list[Any]) -> Any:
        """Invoke ``method`` with positional ``params`` and return the ``result`` field.

        Raises:
            RpcHttpError: on an HTTP error status (retriable for 429 and 5xx).
            RpcTimeoutError: when the request times out.
            RpcTransportError: when the endpoint cannot be reached.
            RpcResponseError: on a JSON-RPC error object or an unparseable body.
        """
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        try:
            response = await self._http.post(self._url, json=payload)
        except httpx.TimeoutException as exc:
            raise RpcTimeoutError(method=method, reason=type(exc).__name__) from exc
        except httpx.TransportError as exc:
            raise RpcTransportError(
                method=method, reason=str(exc) or type(exc).__name__
            ) from exc

        if response.status_code >= 400:
            raise RpcHttpError(
                method=method,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
            )

        envelope = _parse_envelope(method=method, response=response)
        if envelope.error is not None:
            raise RpcResponseError(
                method=method,
                message=envelope.error.message,
                code=envelope.error.code,
            )
        return envelope.result


def _parse_envelope(method: str, response: httpx.Response) -> _JsonRpcEnvelope:
    try:
        return _JsonRpcEnvelope.model_validate_json(response.content)
    except ValidationError as exc:
        raise RpcResponseError(
            method=method, message=f"malformed response: {exc.error_count()} error(s)"
        ) from exc
