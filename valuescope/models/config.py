"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CacheConfig:
    """Values cache configuration."""

    ttl: str = "30m"


@dataclass
class DiffConfig:
    """Structural diff configuration."""

    context_lines: int = 2


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"


@dataclass
class ValueScopeConfig:
    """Top-level valuescope configuration."""

    cache: CacheConfig = field(default_factory=CacheConfig)
    diff: DiffConfig = field(default_factory=DiffConfig)
    log: LogConfig = field(default_factory=LogConfig)
