#!/usr/bin/env python3
"""Tests for date range validation and bounded iteration."""
from datetime import date, timedelta

import pytest

from busfleet import CancellationToken, InvalidRange, iter_days, validate_range


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


class TestValidateRange:
    """Tests for validate_range."""

    def test_valid_range(self):
        validate_range(date(2025, 1, 1), date(2025, 1, 31))

    def test_single_day(self):
        validate_range(date(2025, 1, 1), date(2025, 1, 1))

    def test_inverted_range_raises(self):
        with pytest.raises(InvalidRange) as exc_info:
            validate_range(date(2025, 2, 1), date(2025, 1, 1))
        assert exc_info.value.start == date(2025, 2, 1)
        assert exc_info.value.end == date(2025, 1, 1)

    def test_span_over_cap_raises(self):
        with pytest.raises(InvalidRange):
            validate_range(date(2024, 1, 1), date(2024, 1, 1) + timedelta(days=400))

    def test_no_cap(self):
        validate_range(date(2020, 1, 1), date(2025, 1, 1), max_days=None)


class TestIterDays:
    """Tests for iter_days."""

    def test_inclusive_of_both_ends(self):
        days = list(iter_days(date(2025, 1, 30), date(2025, 2, 2)))
        assert days == [
            date(2025, 1, 30),
            date(2025, 1, 31),
            date(2025, 2, 1),
            date(2025, 2, 2),
        ]

    def test_validates_before_iterating(self):
        """The error surfaces at call time, not on first next()."""
        with pytest.raises(InvalidRange):
            iter_days(date(2025, 1, 1), date(2025, 1, 1) + timedelta(days=400))

    def test_capped_at_max_days(self, caplog):
        """A span of exactly max_days still yields at most max_days days."""
        start = date(2025, 1, 1)
        days = list(iter_days(start, start + timedelta(days=10), max_days=10))
        assert len(days) == 10
        assert days[-1] == start + timedelta(days=9)
        assert "truncated" in caplog.text

    def test_stops_when_cancelled(self):
        token = CancellationToken()
        seen = []
        for day in iter_days(date(2025, 1, 1), date(2025, 1, 31), token=token):
            seen.append(day)
            if len(seen) == 3:
                token.cancel()
        assert len(seen) == 3


class TestCancellationToken:
    """Tests for CancellationToken."""

    def test_not_cancelled_initially(self):
        assert not CancellationToken().cancelled

    def test_cancel(self):
        token = CancellationToken()
        token.cancel()
        assert token.cancelled

    def test_deadline(self):
        clock = FakeClock()
        token = CancellationToken(timeout=5, clock=clock)
        clock.now = 4.9
        assert not token.cancelled
        clock.now = 5.0
        assert token.cancelled

    def test_stays_cancelled(self):
        clock = FakeClock()
        token = CancellationToken(timeout=1, clock=clock)
        clock.now = 2
        assert token.cancelled
        clock.now = 0
        assert token.cancelled
