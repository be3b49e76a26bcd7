"""valuescope: cache, path resolution and structural diff for chart values.

The three building blocks are independent:

    ExpiringStore  -- thread-safe TTL cache of fetched values text.
    resolve_path   -- dotted field path of a line, inferred from indentation.
    diff_texts     -- keyed-line diff reporting only changed regions.
"""

from valuescope.cache.store import ExpiringStore, build_key
from valuescope.document.diff import diff_texts
from valuescope.document.path import resolve_path

__version__ = "0.1.0"

__all__ = ["ExpiringStore", "__version__", "build_key", "diff_texts", "resolve_path"]
