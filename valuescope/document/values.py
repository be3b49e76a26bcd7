"""Scalar value classification for keyed lines."""

from __future__ import annotations

import re

from valuescope.document.tokenizer import tokenize_line
from valuescope.models.lines import ValueKind

_RE_NUMBER = re.compile(r"^-?\d+(\.\d+)?$")
_BOOLEANS = frozenset({"true", "false", "yes", "no", "on", "off"})
_NULLS = frozenset({"null", "~"})
_BLOCK_INDICATORS = frozenset({"|", ">", "-"})


def classify_value(raw: str) -> ValueKind:
    """Classify the value part of a ``key: value`` line.

    Quoted values are always strings: ``"42"`` is a STRING, ``42`` a NUMBER.
    """
    value = raw.strip()
    if not value:
        return ValueKind.EMPTY
    if value in _BLOCK_INDICATORS:
        return ValueKind.BLOCK
    if value[0] in "\"'":
        return ValueKind.STRING
    if _RE_NUMBER.match(value):
        return ValueKind.NUMBER
    if value.lower() in _BOOLEANS:
        return ValueKind.BOOLEAN
    if value in _NULLS:
        return ValueKind.NULL
    return ValueKind.STRING


def line_value_kind(line: str) -> ValueKind | None:
    """Classify the value of a keyed line; ``None`` for keyless lines."""
    token = tokenize_line(line)
    if not token.has_key:
        return None
    return classify_value(token.value)
