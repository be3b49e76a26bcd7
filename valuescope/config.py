"""Configuration loading from environment variables."""

from __future__ import annotations

import os
import re
from datetime import timedelta

from valuescope.models.config import CacheConfig, DiffConfig, LogConfig, ValueScopeConfig

_RE_TIME_WINDOW = re.compile(r"^([0-9]+)(s|m|h)$")
_UNIT_SECONDS = {"s": 1, "m": 60, "h": 3600}


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"VALUESCOPE_{key}", default)


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_time_window(value: str) -> str:
    if not _RE_TIME_WINDOW.match(value):
        raise ValueError(f"Invalid time window format: {value}")
    return value


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def parse_time_window(value: str) -> timedelta:
    """Convert ``30m`` / ``45s`` / ``2h`` into a timedelta."""
    match = _RE_TIME_WINDOW.match(value)
    if match is None:
        raise ValueError(f"Invalid time window format: {value}")
    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


def load_config() -> ValueScopeConfig:
    """Load configuration from VALUESCOPE_* environment variables."""
    return ValueScopeConfig(
        cache=CacheConfig(
            ttl=_validate_time_window(_env("CACHE_TTL", "30m")),
        ),
        diff=DiffConfig(
            context_lines=_env_int("DIFF_CONTEXT_LINES", 2, min_val=0, max_val=20),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
        ),
    )
