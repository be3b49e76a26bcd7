"""Session-wide test configuration for valuescope."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from valuescope.observability.logging import setup_logging


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging() -> None:
    """Keep debug-level cache and diff events out of captured output."""
    setup_logging("warning")


class FakeClock:
    """Manually advanced UTC clock for expiry tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
