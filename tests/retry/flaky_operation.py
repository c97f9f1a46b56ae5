"""FlakyOperation — a zero-argument async operation that fails a set number of times."""


class FlakyOperation:
    """Raises a fresh ``error_type(message)`` on the first ``failures`` calls.

    Every raised instance is kept in ``raised`` so tests can check which one
    reached the caller.
    """

    def __init__(
        self,
        failures: int,
        message: str,
        error_type: type[Exception] = RuntimeError,
        result: object = "ok",
    ) -> None:
        self._failures = failures
        self._message = message
        self._error_type = error_type
        self._result = result
        self.calls = 0
        self.raised: list[Exception] = []

    async def __call__(self) -> object:
        self.calls += 1
        if self.calls <= self._failures:
            error = self._error_type(self._message)
            self.raised.append(error)
            raise error
        return self._result
