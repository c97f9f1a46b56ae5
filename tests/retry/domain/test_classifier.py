"""Tests for error classification and error descriptions."""

import errno

from rpc_batch.core.errors import RpcBatchError
from rpc_batch.retry.domain.classifier import (
    MessagePatternClassifier,
    RetriableFlagClassifier,
    classification_text,
    describe_error,
)
from rpc_batch.retry.domain.config import DEFAULT_RETRYABLE_PATTERNS
from rpc_batch.rpc.infrastructure.errors import RpcHttpError, RpcResponseError


def _default_classifier() -> MessagePatternClassifier:
    return MessagePatternClassifier(patterns=DEFAULT_RETRYABLE_PATTERNS)


class TestDescribeError:
    """describe_error combines type name, message, and errno name for logging."""

    def test_includes_type_and_message(self) -> None:
        assert describe_error(ValueError("bad value")) == "ValueError: bad value"

    def test_empty_message_is_type_name_only(self) -> None:
        assert describe_error(TimeoutError()) == "TimeoutError"

    def test_os_error_gets_symbolic_errno(self) -> None:
        error = ConnectionResetError(errno.ECONNRESET, "Connection reset by peer")
        text = describe_error(error)
        assert text.startswith("ConnectionResetError: ")
        assert text.endswith("(ECONNRESET)")

    def test_os_error_without_errno(self) -> None:
        assert describe_error(OSError("disk")) == "OSError: disk"


class TestClassificationText:
    """Patterns see the message, falling back to the type name when it is empty."""

    def test_message_only(self) -> None:
        assert classification_text(ValueError("bad value")) == "bad value"

    def test_empty_message_uses_type_name(self) -> None:
        assert classification_text(TimeoutError()) == "TimeoutError"

    def test_os_error_keeps_symbolic_errno(self) -> None:
        error = ConnectionResetError(errno.ECONNRESET, "Connection reset by peer")
        assert classification_text(error).endswith("(ECONNRESET)")


class TestMessagePatternClassifier:
    """Transient iff the message contains any pattern, case-insensitively."""

    def test_rate_limit_message_is_transient(self) -> None:
        assert _default_classifier().is_transient(RuntimeError("HTTP 429"))

    def test_too_many_requests_lowercase_is_transient(self) -> None:
        assert _default_classifier().is_transient(RuntimeError("too many requests"))

    def test_timeout_uppercase_is_transient(self) -> None:
        assert _default_classifier().is_transient(RuntimeError("Request TIMEOUT"))

    def test_timeout_error_type_is_transient(self) -> None:
        assert _default_classifier().is_transient(TimeoutError())

    def test_connection_reset_errno_is_transient(self) -> None:
        error = ConnectionResetError(errno.ECONNRESET, "Connection reset by peer")
        assert _default_classifier().is_transient(error)

    def test_unrelated_message_is_not_transient(self) -> None:
        assert not _default_classifier().is_transient(ValueError("invalid digest"))

    def test_type_name_is_ignored_when_message_is_present(self) -> None:
        assert not _default_classifier().is_transient(
            _TimeoutSettingError("invalid value for setting")
        )

    def test_custom_patterns(self) -> None:
        classifier = MessagePatternClassifier(patterns=["Node Is Busy"])
        assert classifier.is_transient(RuntimeError("node is busy, try later"))
        assert not classifier.is_transient(RuntimeError("429"))

    def test_no_patterns_means_nothing_is_transient(self) -> None:
        assert not MessagePatternClassifier(patterns=[]).is_transient(
            RuntimeError("429")
        )


class TestRetriableFlagClassifier:
    """RpcBatchError's retriable flag wins; other errors use the fallback."""

    def test_retriable_rpc_batch_error(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        assert classifier.is_transient(RpcBatchError("whatever", retriable=True))

    def test_unflagged_error_with_matching_message_is_transient(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        assert classifier.is_transient(RpcBatchError("429", retriable=False))

    def test_unflagged_error_with_other_message_is_not_transient(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        assert not classifier.is_transient(RpcBatchError("bad params"))

    def test_rate_limited_json_rpc_error_body_is_transient(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        error = RpcResponseError(
            method="sui_getObject", message="429 Too Many Requests", code=-32005
        )
        assert classifier.is_transient(error)

    def test_request_timeout_status_is_transient(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        error = RpcHttpError("sui_getObject", 408, "Request Timeout")
        assert error.retriable is False
        assert classifier.is_transient(error)

    def test_client_error_status_is_not_transient(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        assert not classifier.is_transient(
            RpcHttpError("sui_getObject", 400, "Bad Request")
        )

    def test_other_errors_go_to_fallback(self) -> None:
        classifier = RetriableFlagClassifier(fallback=_default_classifier())
        assert classifier.is_transient(RuntimeError("ETIMEDOUT"))
        assert not classifier.is_transient(RuntimeError("nope"))


class _TimeoutSettingError(Exception):
    pass
