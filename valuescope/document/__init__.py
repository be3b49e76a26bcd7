"""Line-structure analysis of YAML-like values documents.

Submodules:
    tokenizer  -- Per-line classification (blank / comment / keyed / list item / other).
    path       -- Indentation-based dotted path resolver.
    diff       -- Keyed-line structural diff with context windowing.
    values     -- Scalar value classification.
    search     -- Case-insensitive line search and match cursor.
"""

from valuescope.document.diff import diff_texts
from valuescope.document.path import resolve_path
from valuescope.document.search import MatchCursor, find_matches
from valuescope.document.tokenizer import extract_key, indent_of, split_lines, tokenize_line
from valuescope.document.values import classify_value

__all__ = [
    "MatchCursor",
    "classify_value",
    "diff_texts",
    "extract_key",
    "find_matches",
    "indent_of",
    "resolve_path",
    "split_lines",
    "tokenize_line",
]
