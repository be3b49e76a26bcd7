"""Prometheus counters for the values cache, loader and differ."""

from __future__ import annotations

from prometheus_client import Counter

cache_lookups_total = Counter(
    "valuescope_cache_lookups_total",
    "Values cache lookups by result (hit, miss, expired)",
    ["result"],
)

fetches_total = Counter(
    "valuescope_fetches_total",
    "Upstream values fetches by outcome (success, error)",
    ["outcome"],
)

diff_records_total = Counter(
    "valuescope_diff_records_total",
    "Structural diff records emitted, by kind",
    ["kind"],
)
