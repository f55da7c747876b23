"""Centralized geometry configuration sourced from environment."""

from __future__ import annotations

import math
import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

DEFAULT_EQUALITY_TOLERANCE = 1e-4
_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class GeometryConfig:
    """Immutable geometry/runtime configuration."""

    equality_tolerance: float = DEFAULT_EQUALITY_TOLERANCE
    log_level: str = "INFO"
    log_format: str = "text"
    log_file: str | None = None


_GEOMETRY_CONFIG: ContextVar[GeometryConfig | None] = ContextVar(
    "vectorgfx_geometry_config", default=None
)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if math.isnan(value):
        value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with package-prefixed override."""
    value = _raw("VECTORGFX_LOG_LEVEL", env=env)
    if value is None or not value.strip():
        value = _text("LOG_LEVEL", default, env=env)
    return value.strip().upper()


def _log_format(env: Mapping[str, str] | None) -> str:
    value = _text("VECTORGFX_LOG_FORMAT", "text", env=env).lower()
    return value if value in _LOG_FORMATS else "text"


def load_geometry_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    """Load immutable geometry configuration from env vars."""
    log_file = _text("VECTORGFX_LOG_FILE", "", env=env)
    return GeometryConfig(
        equality_tolerance=_float(
            "VECTORGFX_EQUALITY_TOLERANCE",
            DEFAULT_EQUALITY_TOLERANCE,
            minimum=0.0,
            env=env,
        ),
        log_level=resolve_log_level_name(env=env),
        log_format=_log_format(env),
        log_file=log_file or None,
    )


def initialize_geometry_config(*, env: Mapping[str, str] | None = None) -> GeometryConfig:
    config = load_geometry_config(env=env)
    _GEOMETRY_CONFIG.set(config)
    return config


def set_geometry_config(config: GeometryConfig) -> GeometryConfig:
    _GEOMETRY_CONFIG.set(config)
    return config


def reset_geometry_config() -> None:
    """Drop the active configuration so the next read reloads from environment."""
    _GEOMETRY_CONFIG.set(None)


def get_geometry_config() -> GeometryConfig:
    config = _GEOMETRY_CONFIG.get()
    if config is not None:
        return config
    return initialize_geometry_config()


__all__ = [
    "DEFAULT_EQUALITY_TOLERANCE",
    "GeometryConfig",
    "get_geometry_config",
    "initialize_geometry_config",
    "load_geometry_config",
    "reset_geometry_config",
    "resolve_log_level_name",
    "set_geometry_config",
]
