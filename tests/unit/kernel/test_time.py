"""Unit tests for the clocks."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime

from mp_exports.kernel.time import FrozenClock, SystemClock
from mp_exports.testing.fakes import FakeClock, FakeSleeper


class TestSystemClock:
    def test_now_is_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_monotonic_never_goes_back(self) -> None:
        clock = SystemClock()
        first = clock.monotonic()
        assert clock.monotonic() >= first


class TestFrozenClock:
    def test_frozen(self) -> None:
        clock = FrozenClock(datetime(2026, 1, 1, tzinfo=UTC))
        assert clock.now() == clock.now()
        assert clock.monotonic() == 0.0

    def test_advance_moves_both_readings(self) -> None:
        clock = FakeClock()
        clock.advance(seconds=90)
        assert clock.now() == datetime(2026, 1, 1, 12, 1, 30, tzinfo=UTC)
        assert clock.monotonic() == 90.0


class TestFakeSleeper:
    def test_records_and_advances(self) -> None:
        clock = FakeClock()
        sleeper = FakeSleeper(clock)
        asyncio.run(sleeper(1.5))
        asyncio.run(sleeper(1.5))
        assert sleeper.delays == [1.5, 1.5]
        assert clock.monotonic() == 3.0

    def test_without_clock(self) -> None:
        sleeper = FakeSleeper()
        asyncio.run(sleeper(2.0))
        assert sleeper.delays == [2.0]
