"""Cache layer for valuescope.

Submodules:
    locks  -- Shared/exclusive (reader/writer) lock.
    store  -- Time-bound values cache with lazy expiry.
"""

from valuescope.cache.store import CacheEntry, ExpiringStore, build_key

__all__ = ["CacheEntry", "ExpiringStore", "build_key"]
