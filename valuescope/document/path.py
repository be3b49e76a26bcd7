"""Structural path resolution for values documents.

``resolve_path`` answers "which field does this line belong to" using
indentation alone.  It is a heuristic over possibly malformed documents,
not a parser: anything it cannot place resolves to the empty string.

Resolution runs in two backward scans:

1. If the target line has no key of its own (a list item, a continuation
   or block scalar line) the nearest plausible keyed parent becomes the
   target.  List items look for a keyed line exactly one level (two
   units) shallower; other lines accept any shallower keyed line or a
   keyed sibling at the same indent.
2. From the target upward, the first keyed line at each strictly smaller
   indent contributes an ancestor segment, until indent 0 or the top of
   the document.
"""

from __future__ import annotations

from collections.abc import Sequence

from valuescope.document.tokenizer import tokenize_line
from valuescope.models.lines import LineKind, LineToken

PATH_SEPARATOR = "."

# List items are conventionally nested two units under their parent key.
_LIST_NESTING = 2


def _find_parent(lines: Sequence[str], index: int, token: LineToken) -> tuple[int, LineToken] | None:
    is_list_item = token.kind == LineKind.LIST_ITEM
    target_indent = max(token.indent - _LIST_NESTING, 0) if is_list_item else token.indent

    for i in range(index - 1, -1, -1):
        candidate = tokenize_line(lines[i])
        if not candidate.has_key:
            continue
        if is_list_item:
            if candidate.indent == target_indent:
                return i, candidate
        elif candidate.indent < token.indent or candidate.indent == target_indent:
            return i, candidate
    return None


def _ancestor_keys(lines: Sequence[str], index: int, indent: int) -> list[str]:
    keys: list[str] = []
    for i in range(index - 1, -1, -1):
        if indent == 0:
            break
        candidate = tokenize_line(lines[i])
        if not candidate.is_structural:
            continue
        if candidate.has_key and candidate.indent < indent:
            keys.append(candidate.key)
            indent = candidate.indent
        if candidate.indent == 0:
            break
    keys.reverse()
    return keys


def resolve_path(lines: Sequence[str], line_index: int) -> str:
    """Return the dotted path of the field *line_index* belongs to.

    >>> resolve_path(["app:", "  name: x", "  replicas: 3"], 2)
    'app.replicas'

    Out-of-range indices, blank and comment lines, and orphaned lines with
    no resolvable parent all yield ``""``.
    """
    if line_index < 0 or line_index >= len(lines):
        return ""

    token = tokenize_line(lines[line_index])
    if not token.is_structural:
        return ""

    index = line_index
    if not token.has_key:
        parent = _find_parent(lines, index, token)
        if parent is None:
            return ""
        index, token = parent

    segments = _ancestor_keys(lines, index, token.indent)
    segments.append(token.key)
    return PATH_SEPARATOR.join(segments)


def resolve_all(lines: Sequence[str]) -> list[str]:
    """Resolve every line of a document; unresolvable lines map to ``""``."""
    return [resolve_path(lines, i) for i in range(len(lines))]
