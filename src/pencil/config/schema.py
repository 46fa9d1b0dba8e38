"""Typed configuration schema and loader for the pencil package."""

from __future__ import annotations

import os
from collections.abc import Mapping
from importlib import resources as importlib_resources
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, conint

from pencil.utils.errors import ConfigError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------


class PencilSettings(BaseModel):
    """Initial state of a freshly constructed pencil."""

    durability: conint(ge=0)
    length: conint(ge=0) = 0
    eraser_durability: Optional[conint(ge=0)] = None

    model_config = ConfigDict(extra="forbid")


class LoggingSettings(BaseModel):
    """Logging level and the environment variable that may override it."""

    level: LogLevel = "WARNING"
    level_env: str = "PENCIL_LOG_LEVEL"

    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """Top-level configuration model."""

    schema_version: conint(ge=1)
    pencil: PencilSettings
    logging: LoggingSettings

    model_config = ConfigDict(extra="forbid")


# ---------------------------------------------------------------------------
# Loader utilities
# ---------------------------------------------------------------------------


def deep_merge_dicts(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge mapping ``b`` onto ``a`` returning a new dict."""

    result: dict[str, Any] = dict(a)
    for key, b_val in b.items():
        if key in result and isinstance(result[key], dict) and isinstance(b_val, dict):
            result[key] = deep_merge_dicts(result[key], b_val)
        else:
            result[key] = b_val
    return result


def _read_yaml_mapping(stream: Any, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(stream) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{source}: invalid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: expected a mapping at top level")
    return data


def load_config(
    path: str | os.PathLike[str] | None = None,
    *,
    env: Mapping[str, str] | None = None,
) -> ConfigModel:
    """Load configuration from defaults and optional user overrides.

    Precedence of sources: package ``defaults.yml`` < user-provided YAML <
    environment variable named by ``logging.level_env``.  Invalid YAML, unknown
    keys and out-of-range values raise :class:`ConfigError`; a missing
    ``path`` raises :class:`FileNotFoundError`.
    """

    with (
        importlib_resources.files("pencil.config")
        .joinpath("defaults.yml")
        .open("r", encoding="utf-8") as f
    ):
        defaults = _read_yaml_mapping(f, "defaults.yml")

    if path is not None:
        with Path(path).open("r", encoding="utf-8") as f:
            overrides = _read_yaml_mapping(f, str(path))
        merged = deep_merge_dicts(defaults, overrides)
    else:
        merged = defaults

    environ = env if env is not None else os.environ
    logging_cfg = merged.get("logging")
    level_env = logging_cfg.get("level_env") if isinstance(logging_cfg, dict) else None
    if isinstance(level_env, str) and environ.get(level_env):
        merged = deep_merge_dicts(merged, {"logging": {"level": environ[level_env].upper()}})

    try:
        return ConfigModel.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


__all__ = [
    "ConfigModel",
    "PencilSettings",
    "LoggingSettings",
    "LogLevel",
    "deep_merge_dicts",
    "load_config",
]
