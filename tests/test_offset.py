"""Tests for the timezone offset normalizer."""

from __future__ import annotations

import pytest

from datefmt.core import DateTime, LocalDate, LocalDateTime
from datefmt.format import timezone_adjustment
from datefmt.units import Timezone


class TestTimezoneAdjustment:
    """Tests for timezone_adjustment."""

    def test_positive_offset_subtracts(self) -> None:
        """Text two hours ahead of UTC is shifted back."""
        dt = DateTime(2010, 10, 3, 12, 0)
        assert timezone_adjustment(dt, "+02:00") == DateTime(2010, 10, 3, 10, 0)

    def test_negative_offset_adds(self) -> None:
        """Text behind UTC is shifted forward."""
        dt = DateTime(2010, 10, 3, 12, 0)
        assert timezone_adjustment(dt, "-0130") == DateTime(2010, 10, 3, 13, 30)

    def test_offset_at_end_of_text(self) -> None:
        """Only the trailing offset is read."""
        dt = DateTime(2010, 10, 3, 12, 0)
        shifted = timezone_adjustment(dt, "2010-10-03T12:00:00.000+05:30")
        assert (shifted.hour, shifted.minute) == (6, 30)

    def test_day_carry(self) -> None:
        """Shifting past midnight moves the date."""
        dt = DateTime(2010, 10, 3, 23, 0)
        shifted = timezone_adjustment(dt, "-02:00")
        assert (shifted.day, shifted.hour) == (4, 1)

    @pytest.mark.parametrize("text", ["Z", "+05", "garbage", "", "12:00"])
    def test_no_shift(self, text: str) -> None:
        """Z, hour-only offsets and offset-free text leave the value alone."""
        dt = DateTime(2010, 10, 3, 12, 0)
        assert timezone_adjustment(dt, text) is dt

    def test_new_value(self) -> None:
        """The input instant is never modified."""
        dt = DateTime(2010, 10, 3, 12, 0)
        shifted = timezone_adjustment(dt, "+01:00")
        assert shifted is not dt
        assert dt.hour == 12

    def test_applied_twice_shifts_twice(self) -> None:
        """The adjustment is not idempotent."""
        dt = DateTime(2010, 10, 3, 12, 0)
        once = timezone_adjustment(dt, "+01:00")
        assert timezone_adjustment(once, "+01:00").hour == 10

    def test_keeps_zone(self) -> None:
        """The instant keeps its own offset; only the clock moves."""
        dt = DateTime(2010, 10, 3, 12, 0, timezone=Timezone.from_hours(3))
        shifted = timezone_adjustment(dt, "+01:00")
        assert shifted.offset_minutes == 180
        assert shifted.hour == 11

    def test_local_date_time(self) -> None:
        """Zone-naive values are shifted too."""
        ldt = LocalDateTime(2010, 10, 3, 12, 0)
        assert timezone_adjustment(ldt, "+0100") == LocalDateTime(2010, 10, 3, 11, 0)

    def test_local_date_unchanged(self) -> None:
        """Dates have no clock to shift."""
        d = LocalDate(2010, 10, 3)
        assert timezone_adjustment(d, "+12:00") is d
