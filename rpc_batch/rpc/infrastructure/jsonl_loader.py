"""JSONL request loader — reads a requests file and returns typed RpcRequest objects."""

import json
from pathlib import Path

from pydantic import ValidationError

from rpc_batch.rpc.domain.observer import RequestsObserver
from rpc_batch.rpc.domain.request import RpcRequest
from rpc_batch.rpc.infrastructure.errors import RequestLoadError


class JsonlRequestLoader:
    """Loads a JSONL file of ``{"method": ..., "params": [...]}`` objects."""

    def __init__(self, observer: RequestsObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> list[RpcRequest]:
        """
        Load every request from ``path``, preserving file order.

        Collects ALL per-line errors before raising a single RequestLoadError.

        Raises:
            RequestLoadError: if the file is not found, cannot be read or
                decoded as UTF-8, any line is invalid JSON, or any line does
                not describe a valid request.
        """
        path_str = str(path)
        self._observer.requests_loading_started(path=path_str)

        try:
            lines = self._read_lines(path=path)
        except FileNotFoundError as exc:
            reason = "file not found"
            self._observer.requests_loading_failed(path=path_str, reason=reason)
            raise RequestLoadError(path=path, reason=reason) from exc
        except OSError as exc:
            reason = f"unreadable file: {exc.strerror or exc}"
            self._observer.requests_loading_failed(path=path_str, reason=reason)
            raise RequestLoadError(path=path, reason=reason) from exc
        except UnicodeDecodeError as exc:
            reason = "not valid UTF-8"
            self._observer.requests_loading_failed(path=path_str, reason=reason)
            raise RequestLoadError(path=path, reason=reason) from exc

        requests: list[RpcRequest] = []
        errors: list[str] = []
        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index)
            if isinstance(result, str):
                errors.append(result)
            else:
                requests.append(result)

        if errors:
            reason = "; ".join(errors)
            self._observer.requests_loading_failed(path=path_str, reason=reason)
            raise RequestLoadError(path=path, reason=reason)

        self._observer.requests_loading_completed(
            path=path_str, total_requests=len(requests)
        )
        return requests

    def _read_lines(self, path: Path) -> list[str]:
        """Open the file and return all non-empty lines."""
        with open(path, encoding="utf-8") as fh:
            return [line for line in fh if line.strip()]

    def _parse_line(self, line: str, index: int) -> RpcRequest | str:
        """Return an RpcRequest, or an error string describing the problem."""
        try:
            data = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        try:
            return RpcRequest.model_validate(data)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "<root>"
                for err in exc.errors()
            )
            return f"line {index}: invalid request ({fields})"
