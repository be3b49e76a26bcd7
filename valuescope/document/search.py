"""Case-insensitive line search with a wrap-around match cursor."""

from __future__ import annotations

from collections.abc import Sequence


def find_matches(lines: Sequence[str], query: str) -> list[int]:
    """Return indices of lines containing *query*, ignoring case."""
    if not query:
        return []
    needle = query.lower()
    return [i for i, line in enumerate(lines) if needle in line.lower()]


class MatchCursor:
    """Steps through search matches, wrapping at both ends.

    An empty cursor answers ``None`` to every navigation call.
    """

    def __init__(self, matches: Sequence[int]) -> None:
        self._matches = list(matches)
        self._position = 0

    def __len__(self) -> int:
        return len(self._matches)

    @property
    def position(self) -> int:
        return self._position

    def current(self) -> int | None:
        if not self._matches:
            return None
        return self._matches[self._position]

    def next(self) -> int | None:
        if not self._matches:
            return None
        self._position = (self._position + 1) % len(self._matches)
        return self._matches[self._position]

    def previous(self) -> int | None:
        if not self._matches:
            return None
        self._position = (self._position - 1 + len(self._matches)) % len(self._matches)
        return self._matches[self._position]
