"""Diff result data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ChangeKind(StrEnum):
    """Kind of a line-level change record."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class ChangeRecord:
    """One line of a structural diff.

    ``origin_line_index`` is the 0-based index of ``line`` in the document it
    came from: the old document for REMOVED records, the new one otherwise.
    """

    kind: ChangeKind
    line: str
    origin_line_index: int


@dataclass
class VersionDiff:
    """Result of comparing two versions of the same chart's values."""

    name: str
    old_version: str
    new_version: str
    records: list[ChangeRecord] = field(default_factory=list)

    @property
    def added(self) -> int:
        return sum(1 for r in self.records if r.kind == ChangeKind.ADDED)

    @property
    def removed(self) -> int:
        return sum(1 for r in self.records if r.kind == ChangeKind.REMOVED)

    @property
    def has_changes(self) -> bool:
        return any(r.kind != ChangeKind.UNCHANGED for r in self.records)
