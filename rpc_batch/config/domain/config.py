"""Top-level AppConfig aggregate — the root configuration object."""

from urllib.parse import urlsplit

from pydantic import BaseModel, Field

from rpc_batch.batch.domain.config import BatchConfig
from rpc_batch.retry.domain.config import RetryConfig


class RpcEndpointConfig(BaseModel, frozen=True):
    url: str = Field(min_length=1)
    timeout_seconds: float = Field(default=30.0, gt=0)

    @property
    def display_url(self) -> str:
        """``url`` reduced to scheme and host for logs and console output.

        A non-empty path, query, fragment or userinfo is replaced by ``***``.
        """
        parts = urlsplit(self.url)
        host = parts.netloc.rpartition("@")[2]
        if not parts.scheme or not host:
            return "***"
        display = f"{parts.scheme}://{host}"
        if parts.path.strip("/") or parts.query or parts.fragment:
            display += "/***"
        return display


class AppConfig(BaseModel, frozen=True):
    """Root configuration aggregate for an rpc-batch run.

    ``retry`` and ``batch`` fall back to their defaults when omitted.
    """

    name: str = Field(min_length=1)
    rpc: RpcEndpointConfig
    retry: RetryConfig = Field(default_factory=RetryConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
