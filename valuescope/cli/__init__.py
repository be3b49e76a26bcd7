"""valuescope command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``valuescope`` script).
"""

from valuescope.cli.main import cli

__all__ = ["cli"]
