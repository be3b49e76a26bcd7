"""Time-bound cache of fetched values documents.

ExpiringStore maps ``name`` / ``name@version`` keys to text blobs.  Entries
expire lazily: a stale entry is reported as a miss on ``get`` but stays in
the map until the same key is ``set`` again, the store is cleared, or
``purge_expired`` is called.

The store is thread-safe (shared reads, exclusive writes) and holds no I/O
inside its critical sections.  There is no module-level instance; callers
construct one and pass it to whatever needs it.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from valuescope.cache.locks import ReadWriteLock
from valuescope.observability.logging import get_logger
from valuescope.observability.metrics import cache_lookups_total

_log = get_logger("cache.store")

DEFAULT_TTL = timedelta(minutes=30)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


def build_key(name: str, version: str = "") -> str:
    """Return ``name`` for the default version, else ``name@version``."""
    if not version:
        return name
    return f"{name}@{version}"


@dataclass(frozen=True)
class CacheEntry:
    """A cached values blob and the time it was stored."""

    text: str
    stored_at: datetime


class ExpiringStore:
    """Thread-safe TTL cache of values text keyed by chart name and version.

    Args:
        ttl:    How long an entry stays fresh.  Fixed for the store's lifetime.
        clock:  Returns the current time; injectable for tests.
    """

    def __init__(self, ttl: timedelta = DEFAULT_TTL, clock: Clock = _utcnow) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = ReadWriteLock()

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    def get(self, name: str, version: str = "") -> tuple[str, bool]:
        """Return ``(text, True)`` on a fresh hit, ``("", False)`` otherwise."""
        key = build_key(name, version)
        now = self._clock()
        with self._lock.read():
            entry = self._entries.get(key)

        if entry is None:
            cache_lookups_total.labels(result="miss").inc()
            _log.debug("cache_miss", key=key)
            return "", False

        if now - entry.stored_at > self._ttl:
            cache_lookups_total.labels(result="expired").inc()
            _log.debug("cache_expired", key=key, stored_at=entry.stored_at.isoformat())
            return "", False

        cache_lookups_total.labels(result="hit").inc()
        _log.debug("cache_hit", key=key)
        return entry.text, True

    def set(self, name: str, version: str, text: str) -> None:
        key = build_key(name, version)
        entry = CacheEntry(text=text, stored_at=self._clock())
        with self._lock.write():
            self._entries[key] = entry
        _log.debug("cache_set", key=key, size=len(text))

    def clear(self) -> None:
        """Drop every entry, fresh or stale."""
        with self._lock.write():
            dropped = len(self._entries)
            self._entries = {}
        _log.info("cache_cleared", dropped=dropped)

    def purge_expired(self) -> int:
        """Remove stale entries and return how many were dropped."""
        now = self._clock()
        with self._lock.write():
            stale = [k for k, e in self._entries.items() if now - e.stored_at > self._ttl]
            for key in stale:
                del self._entries[key]
        if stale:
            _log.debug("cache_purged", dropped=len(stale))
        return len(stale)

    def __len__(self) -> int:
        """Number of resident entries, including stale ones."""
        with self._lock.read():
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._entries
