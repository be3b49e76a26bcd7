"""Values loading for valuescope.

Exposes:
    ValuesLoader        -- cache-fronted loader and version comparator.
    ValuesSource        -- protocol for upstream values producers.
    StaticValuesSource  -- mapping-backed source.
    DirectoryValuesSource -- on-demand reader of values files.
    FetchError          -- raised when the upstream source fails.
"""

from valuescope.loader.service import (
    DirectoryValuesSource,
    FetchError,
    StaticValuesSource,
    ValueScopeError,
    ValuesLoader,
    ValuesSource,
)

__all__ = [
    "DirectoryValuesSource",
    "FetchError",
    "StaticValuesSource",
    "ValueScopeError",
    "ValuesLoader",
    "ValuesSource",
]
