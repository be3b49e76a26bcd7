"""Core data structures for valuescope."""

from valuescope.models.changes import ChangeKind, ChangeRecord, VersionDiff
from valuescope.models.config import ValueScopeConfig
from valuescope.models.lines import LineKind, LineToken, ValueKind

__all__ = [
    "ChangeKind",
    "ChangeRecord",
    "LineKind",
    "LineToken",
    "ValueKind",
    "ValueScopeConfig",
    "VersionDiff",
]
