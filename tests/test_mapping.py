"""Tests for instant_to_map."""

from __future__ import annotations

import pytest

from datefmt.convert import instant_to_map
from datefmt.core import DateTime, Interval, LocalDate, LocalDateTime, Period
from datefmt.errors import UnsupportedTypeError

_KEYS = ["years", "months", "days", "hours", "minutes", "seconds", "millis"]


class TestInstants:
    """Tests for instant values."""

    def test_date_time(self, sunday: DateTime) -> None:
        """A DateTime maps to its own fields."""
        assert instant_to_map(sunday) == {
            "years": 2010,
            "months": 10,
            "days": 3,
            "hours": 14,
            "minutes": 5,
            "seconds": 9,
            "millis": 7,
        }

    def test_local_date(self) -> None:
        """A LocalDate has a zero clock."""
        result = instant_to_map(LocalDate(2010, 10, 3))
        assert list(result) == _KEYS
        assert result["hours"] == result["millis"] == 0

    def test_local_date_time(self) -> None:
        """A LocalDateTime maps its wall clock."""
        assert instant_to_map(LocalDateTime(2010, 10, 3, 23, 59))["minutes"] == 59


class TestPeriodsAndIntervals:
    """Tests for Period and Interval values."""

    def test_period(self) -> None:
        """A Period maps to its components with weeks folded into days."""
        result = instant_to_map(Period(years=1, weeks=1, days=2, millis=5))
        assert result == {
            "years": 1,
            "months": 0,
            "days": 9,
            "hours": 0,
            "minutes": 0,
            "seconds": 0,
            "millis": 5,
        }

    def test_interval(self) -> None:
        """An Interval maps to its calendar difference."""
        iv = Interval(LocalDate(2010, 1, 31), LocalDate(2010, 3, 2))
        result = instant_to_map(iv)
        assert (result["months"], result["days"]) == (1, 2)

    def test_tagged_period_map(self) -> None:
        """A Period-tagged map is returned as is."""
        value = {"_type": "Period", "months": 2}
        assert instant_to_map(value) is value

    def test_tagged_interval_map(self) -> None:
        """An Interval-tagged map is read through its ends."""
        value = {
            "_type": "Interval",
            "start": LocalDate(2010, 1, 1),
            "end": LocalDate(2011, 2, 1),
        }
        result = instant_to_map(value)
        assert (result["years"], result["months"], result["days"]) == (1, 1, 0)

    def test_interval_map_missing_end(self) -> None:
        """An Interval-tagged map needs both ends."""
        with pytest.raises(UnsupportedTypeError, match="'end'"):
            instant_to_map({"_type": "Interval", "start": LocalDate(2010, 1, 1)})


class TestUnsupported:
    """Tests for values that have no field map."""

    @pytest.mark.parametrize(
        "value",
        [42, "2010-10-03", None, {"years": 1}, {"_type": "Duration"}],
    )
    def test_rejected(self, value: object) -> None:
        """Anything else raises UnsupportedTypeError."""
        with pytest.raises(UnsupportedTypeError):
            instant_to_map(value)  # type: ignore[arg-type]

    def test_is_type_error(self) -> None:
        """UnsupportedTypeError is also a TypeError."""
        with pytest.raises(TypeError):
            instant_to_map(object())  # type: ignore[arg-type]
