"""Per-line token structures for values documents."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class LineKind(StrEnum):
    """Structural classification of a single line."""

    BLANK = "blank"
    COMMENT = "comment"
    KEYED = "keyed"
    LIST_ITEM = "list_item"
    OTHER = "other"


class ValueKind(StrEnum):
    """Scalar classification of the value part of a keyed line."""

    EMPTY = "empty"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    STRING = "string"
    BLOCK = "block"


@dataclass(frozen=True)
class LineToken:
    """Tokenized view of one line.

    ``key`` and ``value`` are only set for KEYED lines.  ``indent`` counts
    one unit per space and two per tab.
    """

    kind: LineKind
    indent: int
    key: str = ""
    value: str = ""

    @property
    def has_key(self) -> bool:
        return self.kind == LineKind.KEYED

    @property
    def is_structural(self) -> bool:
        """False for lines that never carry a path (blanks and comments)."""
        return self.kind not in (LineKind.BLANK, LineKind.COMMENT)
