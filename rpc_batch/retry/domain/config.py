"""Retry configuration model and the backoff delay schedule it implies."""

from collections.abc import Iterator

from pydantic import BaseModel, Field

DEFAULT_RETRYABLE_PATTERNS: tuple[str, ...] = (
    "429",
    "Too Many Requests",
    "ECONNRESET",
    "ETIMEDOUT",
    "timeout",
)


class RetryConfig(BaseModel, frozen=True):
    """Immutable retry policy for a single fallible operation.

    ``max_retries`` counts additional attempts after the first, so an operation
    is invoked at most ``max_retries + 1`` times. ``initial_delay_seconds`` is
    not required to be <= ``max_delay_seconds``; every delay is clamped anyway.
    """

    max_retries: int = Field(default=3, ge=0)
    initial_delay_seconds: float = Field(default=1.0, gt=0)
    max_delay_seconds: float = Field(default=10.0, gt=0)
    backoff_multiplier: float = Field(default=2.0, gt=1)
    retryable_patterns: tuple[str, ...] = DEFAULT_RETRYABLE_PATTERNS


def backoff_delays(config: RetryConfig) -> Iterator[float]:
    """Yield the delay before each retry, ``max_retries`` values in total.

    The sequence is ``initial, initial*m, initial*m**2, ...`` with every value
    clamped to ``max_delay_seconds``.
    """
    delay = config.initial_delay_seconds
    for _ in range(config.max_retries):
        yield min(delay, config.max_delay_seconds)
        delay = min(delay * config.backoff_multiplier, config.max_delay_seconds)
