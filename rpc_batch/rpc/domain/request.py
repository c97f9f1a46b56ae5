"""RPC request and result value objects."""

from typing import Any

from pydantic import BaseModel, Field


class RpcRequest(BaseModel, frozen=True):
    """Immutable value object describing a single RPC method invocation."""

    method: str = Field(min_length=1)
    params: list[Any] = Field(default_factory=list)


class RpcCallResult(BaseModel, frozen=True):
    index: int = Field(ge=0)
    method: str
    result: Any
