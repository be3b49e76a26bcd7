"""Structural diff between two versions of a values document.

Lines are matched by their bare key (not their full path), so the diff is
keyed-line aware but coarse: a key that recurs at several nesting depths is
indexed once, by its last occurrence.  Keyless lines (list items, blanks,
comments, continuations) are never compared; they only appear as context.

Only the neighbourhoods of changes are reported.  A new-document line is
kept when a changed line lies within ``context_lines`` raw positions of it.
Keys that exist only in the old document are appended after the windowed
section, in old-document order.
"""

from __future__ import annotations

from dataclasses import dataclass

from valuescope.document.tokenizer import split_lines, tokenize_line
from valuescope.models.changes import ChangeKind, ChangeRecord
from valuescope.observability.logging import get_logger
from valuescope.observability.metrics import diff_records_total

_log = get_logger("document.diff")

DEFAULT_CONTEXT_LINES = 2


@dataclass(frozen=True)
class _KeyedLine:
    line: str
    index: int


def _index_keys(lines: list[str]) -> dict[str, _KeyedLine]:
    indexed: dict[str, _KeyedLine] = {}
    for i, line in enumerate(lines):
        token = tokenize_line(line)
        if token.has_key:
            indexed[token.key] = _KeyedLine(line=line, index=i)
    return indexed


def _near_change(index: int, changed: set[int], context_lines: int) -> bool:
    return any(j in changed for j in range(index - context_lines, index + context_lines + 1))


def diff_texts(
    old_text: str,
    new_text: str,
    context_lines: int = DEFAULT_CONTEXT_LINES,
) -> list[ChangeRecord]:
    """Compare *old_text* with *new_text* and return the changed regions.

    A modified key yields a REMOVED record for the old line immediately
    followed by an ADDED record for the new one.  Identical inputs yield
    only UNCHANGED records (in practice, none at all).
    """
    context_lines = max(context_lines, 0)
    old_lines = split_lines(old_text)
    new_lines = split_lines(new_text)
    old_keys = _index_keys(old_lines)
    new_keys = _index_keys(new_lines)

    changed: set[int] = set()
    for key, new in new_keys.items():
        old = old_keys.get(key)
        if old is None or old.line != new.line:
            changed.add(new.index)

    records: list[ChangeRecord] = []
    for i, line in enumerate(new_lines):
        if not _near_change(i, changed, context_lines):
            continue

        key = tokenize_line(line).key
        if not key:
            records.append(ChangeRecord(ChangeKind.UNCHANGED, line, i))
            continue

        old = old_keys.get(key)
        if old is None:
            records.append(ChangeRecord(ChangeKind.ADDED, line, i))
        elif old.line != line:
            records.append(ChangeRecord(ChangeKind.REMOVED, old.line, old.index))
            records.append(ChangeRecord(ChangeKind.ADDED, line, i))
        else:
            records.append(ChangeRecord(ChangeKind.UNCHANGED, line, i))

    removed = sorted(
        (old for key, old in old_keys.items() if key not in new_keys),
        key=lambda entry: entry.index,
    )
    records.extend(ChangeRecord(ChangeKind.REMOVED, old.line, old.index) for old in removed)

    for kind in ChangeKind:
        count = sum(1 for r in records if r.kind == kind)
        if count:
            diff_records_total.labels(kind=kind.value).inc(count)

    _log.debug(
        "diff_computed",
        old_lines=len(old_lines),
        new_lines=len(new_lines),
        changed=len(changed),
        removed_only=len(removed),
        records=len(records),
    )
    return records
