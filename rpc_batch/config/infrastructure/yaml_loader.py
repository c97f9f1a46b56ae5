"""YAML config loader — parses, interpolates env vars, validates, and emits observer events."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from rpc_batch.config.domain.config import AppConfig
from rpc_batch.config.domain.observer import ConfigObserver
from rpc_batch.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from rpc_batch.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Loads, interpolates, validates, and returns an AppConfig from a YAML file."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> AppConfig:
        """
        Load, interpolate, validate, and return an AppConfig from a YAML file.

        Raises:
            ConfigLoadError: if the file is missing, unreadable, not UTF-8, or
                not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the document does not match the schema.
        """
        raw = _parse_yaml(path=path)
        _check_missing_env_vars(raw=raw)
        cfg = _build_config(interpolated=interpolate(raw))
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(name=cfg.name, url=cfg.rpc.display_url)
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except OSError as exc:
        raise ConfigLoadError(
            path=path, reason=f"unreadable file: {exc.strerror or exc}"
        ) from exc
    except UnicodeDecodeError as exc:
        raise ConfigLoadError(path=path, reason="not valid UTF-8") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _build_config(interpolated: Any) -> AppConfig:
    if not isinstance(interpolated, dict):
        raise ConfigValidationError("top-level document must be a mapping")
    try:
        return AppConfig.model_validate(interpolated)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: AppConfig, observer: ConfigObserver) -> None:
    if cfg.retry.initial_delay_seconds > cfg.retry.max_delay_seconds:
        observer.config_delay_clamped_warning(
            initial_delay_seconds=cfg.retry.initial_delay_seconds,
            max_delay_seconds=cfg.retry.max_delay_seconds,
        )
