"""CLI entrypoint for rpc-batch — typer app with `call` and `check-config` commands."""

import asyncio
import sys
from pathlib import Path
from typing import Any, Optional

import structlog
import typer

from rpc_batch.batch.application.runner import BatchRunner
from rpc_batch.batch.domain.observer import BatchObserver
from rpc_batch.batch.infrastructure.composite_observer import CompositeBatchObserver
from rpc_batch.batch.infrastructure.observer import StructlogBatchObserver
from rpc_batch.batch.infrastructure.progress_observer import ProgressBatchObserver
from rpc_batch.config.domain.config import AppConfig
from rpc_batch.config.infrastructure.observer import StructlogConfigObserver
from rpc_batch.config.infrastructure.yaml_loader import YamlConfigLoader
from rpc_batch.core.errors import RpcBatchError
from rpc_batch.retry.application.retrier import BackoffRetrier
from rpc_batch.retry.domain.classifier import (
    MessagePatternClassifier,
    RetriableFlagClassifier,
)
from rpc_batch.retry.domain.config import backoff_delays
from rpc_batch.retry.infrastructure.observer import StructlogRetryObserver
from rpc_batch.rpc.domain.request import RpcCallResult, RpcRequest
from rpc_batch.rpc.infrastructure.jsonl_loader import JsonlRequestLoader
from rpc_batch.rpc.infrastructure.jsonrpc_client import JsonRpcClient
from rpc_batch.rpc.infrastructure.observer import StructlogRequestsObserver

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str) -> None:
    """Configure structlog based on the requested format. Logs go to stderr."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path) -> AppConfig:
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


async def _call_all(
    config: AppConfig,
    requests: list[RpcRequest],
    observer: BatchObserver,
) -> list[Any]:
    """Send every request through the batch runner against one shared client."""
    classifier = RetriableFlagClassifier(
        fallback=MessagePatternClassifier(patterns=config.retry.retryable_patterns)
    )
    retrier = BackoffRetrier(
        config=config.retry,
        observer=StructlogRetryObserver(),
        classifier=classifier,
    )
    async with JsonRpcClient(
        url=config.rpc.url, timeout_seconds=config.rpc.timeout_seconds
    ) as client:
        runner = BatchRunner(config=config.batch, observer=observer, retrier=retrier)
        return await runner.run(
            requests,
            lambda request: client.call(method=request.method, params=request.params),
        )


def _write_results(
    requests: list[RpcRequest], results: list[Any], output: Path | None
) -> None:
    records = [
        RpcCallResult(index=index, method=request.method, result=result)
        for index, (request, result) in enumerate(zip(requests, results, strict=True))
    ]
    text = "".join(f"{record.model_dump_json()}\n" for record in records)
    if output is None:
        sys.stdout.write(text)
    else:
        output.write_text(text, encoding="utf-8")


@app.command()
def call(
    config_path: Path = typer.Argument(..., help="Path to rpc-batch config YAML"),
    requests_path: Path = typer.Argument(
        ..., help="JSONL file, one {\"method\", \"params\"} object per line"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write JSONL results here instead of stdout",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Send every request in REQUESTS_PATH to the configured RPC endpoint."""
    _configure_structlog(log_format=log_format)
    try:
        config = _load_config(config_path=config_path)
        requests = JsonlRequestLoader(observer=StructlogRequestsObserver()).load(
            path=requests_path
        )

        observers: list[BatchObserver] = [StructlogBatchObserver()]
        if log_format != "json":
            observers.append(ProgressBatchObserver())
        batch_observer = CompositeBatchObserver(observers=observers)

        results = asyncio.run(
            _call_all(config=config, requests=requests, observer=batch_observer)
        )
        _write_results(requests=requests, results=results, output=output)

    except KeyboardInterrupt:
        typer.echo("Batch interrupted.", err=True)
        sys.exit(1)
    except RpcBatchError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.", err=True)
        sys.exit(1)


@app.command("check-config")
def check_config(
    config_path: Path = typer.Argument(..., help="Path to rpc-batch config YAML"),
) -> None:
    """Validate a config file and print the effective retry schedule."""
    _configure_structlog(log_format="console")
    try:
        config = _load_config(config_path=config_path)
    except RpcBatchError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    delays = ", ".join(f"{delay:g}s" for delay in backoff_delays(config.retry))
    typer.echo(f"name:        {config.name}")
    typer.echo(f"endpoint:    {config.rpc.display_url}")
    typer.echo(f"concurrency: {config.batch.concurrency}")
    typer.echo(f"attempts:    {config.retry.max_retries + 1}")
    typer.echo(f"delays:      {delays or '-'}")


if __name__ == "__main__":
    app()
