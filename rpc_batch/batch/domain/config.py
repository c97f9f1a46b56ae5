"""Batch configuration model and chunking helper."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class BatchConfig(BaseModel, frozen=True):
    concurrency: int = Field(default=10, ge=1)


def chunked(items: Sequence[T], size: int) -> Iterator[tuple[int, Sequence[T]]]:
    """Yield ``(offset, chunk)`` pairs of contiguous slices of at most ``size`` items."""
    if size < 1:
        raise ValueError("size must be >= 1")
    for offset in range(0, len(items), size):
        yield offset, items[offset : offset + size]
