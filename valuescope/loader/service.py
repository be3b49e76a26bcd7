"""Cache-fronted values loading and version comparison.

ValuesSource   -- Protocol for whatever actually produces values text
                  (a package-manager CLI, an HTTP API, a fixture).
ValuesLoader   -- Consults an ExpiringStore before asking the source and
                  diffs two versions once both are resident.
StaticValuesSource -- Mapping-backed source for tests and offline use.
DirectoryValuesSource -- Reads <name>[@<version>].yaml files on demand.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from valuescope.cache.store import ExpiringStore, build_key
from valuescope.document.diff import DEFAULT_CONTEXT_LINES, diff_texts
from valuescope.models.changes import VersionDiff
from valuescope.observability.logging import get_logger
from valuescope.observability.metrics import fetches_total

_log = get_logger("loader.service")


class ValueScopeError(Exception):
    """Base class for valuescope errors."""


class FetchError(ValueScopeError):
    """Raised when the upstream source cannot produce a values document."""

    def __init__(self, name: str, version: str, cause: Exception) -> None:
        super().__init__(f"Failed to fetch values for '{build_key(name, version)}': {cause}")
        self.name = name
        self.version = version
        self.cause = cause


class ValuesSource(Protocol):
    """Produces the raw values text for a chart.

    ``version == ""`` means the default (latest) version.  Implementations
    raise on failure; the loader wraps whatever they raise in FetchError.
    """

    def fetch(self, name: str, version: str) -> str: ...


class StaticValuesSource:
    """Serves values from an in-memory mapping keyed like the cache."""

    def __init__(self, documents: Mapping[str, str]) -> None:
        self._documents = dict(documents)
        self.fetch_count = 0

    def fetch(self, name: str, version: str) -> str:
        self.fetch_count += 1
        key = build_key(name, version)
        try:
            return self._documents[key]
        except KeyError:
            raise LookupError(f"no values for {key}") from None


class DirectoryValuesSource:
    """Reads values files from a directory tree, one file per fetch.

    ``fetch("bitnami/nginx", "15.0.0")`` opens
    ``<root>/bitnami/nginx@15.0.0.yaml`` (or ``.yml``).  Nothing is read
    until asked for, so unrelated unreadable files never matter.
    """

    suffixes = (".yaml", ".yml")

    def __init__(self, root: Path) -> None:
        self._root = root.resolve()

    def path_for(self, name: str, version: str, suffix: str = ".yaml") -> Path:
        path = (self._root / f"{build_key(name, version)}{suffix}").resolve()
        if not path.is_relative_to(self._root):
            raise ValueError(f"values path escapes {self._root}: {path}")
        return path

    def fetch(self, name: str, version: str) -> str:
        for suffix in self.suffixes:
            path = self.path_for(name, version, suffix)
            if path.is_file():
                return path.read_text(encoding="utf-8")
        raise FileNotFoundError(f"no values file for {build_key(name, version)} under {self._root}")


class ValuesLoader:
    """Loads values through the cache and compares chart versions.

    Fetch failures are never cached, so the next ``load`` retries upstream.
    """

    def __init__(
        self,
        source: ValuesSource,
        store: ExpiringStore,
        context_lines: int = DEFAULT_CONTEXT_LINES,
    ) -> None:
        self._source = source
        self._store = store
        self._context_lines = context_lines

    @property
    def store(self) -> ExpiringStore:
        return self._store

    def load(self, name: str, version: str = "") -> str:
        cached, found = self._store.get(name, version)
        if found:
            return cached

        try:
            text = self._source.fetch(name, version)
        except Exception as exc:
            fetches_total.labels(outcome="error").inc()
            _log.warning("values_fetch_failed", chart=name, version=version, error=str(exc))
            raise FetchError(name, version, exc) from exc

        fetches_total.labels(outcome="success").inc()
        self._store.set(name, version, text)
        return text

    def compare(self, name: str, old_version: str, new_version: str) -> VersionDiff:
        """Diff two versions of *name*'s values, loading each via the cache."""
        old_text = self.load(name, old_version)
        new_text = self.load(name, new_version)
        records = diff_texts(old_text, new_text, context_lines=self._context_lines)
        result = VersionDiff(
            name=name,
            old_version=old_version,
            new_version=new_version,
            records=records,
        )
        _log.info(
            "versions_compared",
            chart=name,
            old_version=old_version,
            new_version=new_version,
            added=result.added,
            removed=result.removed,
        )
        return result

    def invalidate(self) -> None:
        """Forget every cached document, e.g. after a repository refresh."""
        self._store.clear()
