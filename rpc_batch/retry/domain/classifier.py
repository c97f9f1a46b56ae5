"""Error classification — decides whether a failure is worth retrying."""

import errno
from collections.abc import Iterable
from typing import Protocol

from rpc_batch.core.errors import RpcBatchError


class ErrorClassifier(Protocol):
    """Classifies a raised error as transient (retry) or permanent (give up)."""

    def is_transient(self, error: BaseException) -> bool: ...


def describe_error(error: BaseException) -> str:
    """Return the text used to log an error.

    Combines the exception type name with its message. ``OSError``s with a
    known errno also carry the symbolic name (``ECONNRESET``, ``ETIMEDOUT``, ...).
    """
    text = type(error).__name__
    message = str(error)
    if message:
        text = f"{text}: {message}"
    return text + _errno_suffix(error)


def classification_text(error: BaseException) -> str:
    """Return the text retryable patterns are matched against.

    The error message, or the type name when the message is empty, so that a
    bare ``TimeoutError()`` still reads as a timeout. The errno suffix of
    `describe_error` is kept.
    """
    text = str(error) or type(error).__name__
    return text + _errno_suffix(error)


def _errno_suffix(error: BaseException) -> str:
    if isinstance(error, OSError) and error.errno in errno.errorcode:
        return f" ({errno.errorcode[error.errno]})"
    return ""


class MessagePatternClassifier:
    """Treats an error as transient when its message contains any pattern.

    Matching is a case-insensitive substring test against
    `classification_text`. Satisfies the ErrorClassifier protocol structurally.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._patterns = tuple(pattern.lower() for pattern in patterns)

    def is_transient(self, error: BaseException) -> bool:
        text = classification_text(error).lower()
        return any(pattern in text for pattern in self._patterns)


class RetriableFlagClassifier:
    """Widens ``fallback`` with the ``retriable`` flag of RpcBatchError.

    An RpcBatchError flagged retriable is transient whatever its message. An
    unflagged one, like any other error, is still transient when ``fallback``
    says so, so a JSON-RPC error reading "429 Too Many Requests" is retried.
    """

    def __init__(self, fallback: ErrorClassifier) -> None:
        self._fallback = fallback

    def is_transient(self, error: BaseException) -> bool:
        if isinstance(error, RpcBatchError) and error.retriable:
            return True
        return self._fallback.is_transient(error)
