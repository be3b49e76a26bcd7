"""Entry point for `python -m valuescope`.

Usage:
    python -m valuescope diff old.yaml new.yaml
    uv run python -m valuescope path values.yaml 12
"""

from __future__ import annotations

from valuescope.cli import cli

cli()
