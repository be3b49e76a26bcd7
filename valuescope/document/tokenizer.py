"""Per-line tokenizer for YAML-like values documents.

Each line is classified on its own, with no lookahead and no grammar:

    BLANK      -- nothing but whitespace
    COMMENT    -- first non-blank character is ``#``
    LIST_ITEM  -- first non-blank character is ``-``
    KEYED      -- ``<indent><key>: <value>``, key is everything before the
                  first ``:`` (which must not be the first content character)
    OTHER      -- continuation lines, block scalar bodies, anything else

Indent is measured in units: a space counts 1, a tab counts 2.
"""

from __future__ import annotations

from valuescope.models.lines import LineKind, LineToken

_SPACE_UNITS = 1
_TAB_UNITS = 2


def split_lines(text: str) -> list[str]:
    """Split a text blob into a document's lines.

    A trailing newline produces a final empty line so that indices line up
    with what a viewer numbering ``text.split("\\n")`` shows.
    """
    return text.split("\n")


def indent_of(line: str) -> int:
    count = 0
    for ch in line:
        if ch == " ":
            count += _SPACE_UNITS
        elif ch == "\t":
            count += _TAB_UNITS
        else:
            break
    return count


def tokenize_line(line: str) -> LineToken:
    """Classify *line* and pull out its key and value when it has one."""
    indent = 0
    start = len(line)
    for pos, ch in enumerate(line):
        if ch == " ":
            indent += _SPACE_UNITS
        elif ch == "\t":
            indent += _TAB_UNITS
        else:
            start = pos
            break

    content = line[start:].rstrip()
    if not content:
        return LineToken(kind=LineKind.BLANK, indent=indent)

    first = content[0]
    if first == "#":
        return LineToken(kind=LineKind.COMMENT, indent=indent)
    if first == "-":
        return LineToken(kind=LineKind.LIST_ITEM, indent=indent)

    colon = content.find(":")
    if colon > 0:
        key = content[:colon].strip()
        if key:
            return LineToken(
                kind=LineKind.KEYED,
                indent=indent,
                key=key,
                value=content[colon + 1 :].strip(),
            )

    return LineToken(kind=LineKind.OTHER, indent=indent)


def extract_key(line: str) -> str:
    """Return the key of a keyed line, or ``""`` for any other line."""
    return tokenize_line(line).key


def tokenize(lines: list[str]) -> list[LineToken]:
    return [tokenize_line(line) for line in lines]
