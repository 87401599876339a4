"""Interval class representing the span between two instants.

An Interval is half-open, [start, end), and both ends must be instants of
the same shape (two dates, two local date-times, or two DateTimes).
"""

from __future__ import annotations

from typing import ClassVar, Generic, TypeVar

from datefmt._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from datefmt.core.date import LocalDate
from datefmt.core.datetime import DateTime
from datefmt.core.period import Period
from datefmt.errors import ValidationError

T = TypeVar("T", bound=LocalDate)


class Interval(Generic[T]):
    """A span of time between two instants.

    Examples:
        >>> iv = Interval(LocalDate(2010, 1, 31), LocalDate(2010, 3, 2))
        >>> iv.to_period()
        Period(years=0, months=1, weeks=0, days=2, hours=0, minutes=0, seconds=0, millis=0)
    """

    __slots__ = ("_start", "_end")

    _type: ClassVar[str] = "Interval"

    def __init__(self, start: T, end: T) -> None:
        """Create an interval.

        Raises:
            ValidationError: If the ends have different shapes or end is
                before start.
        """
        if type(start) is not type(end):
            raise ValidationError(
                f"interval ends must have the same type, got "
                f"{type(start).__name__} and {type(end).__name__}"
            )
        if end < start:
            raise ValidationError(f"interval end {end} is before start {start}")

        self._start = start
        self._end = end

    @property
    def start(self) -> T:
        return self._start

    @property
    def end(self) -> T:
        return self._end

    def to_period(self) -> Period:
        """Return the calendar difference from start to end.

        Whole months are counted first (clamping the day to the end of
        shorter months), then the remainder is split into days, hours,
        minutes, seconds and milliseconds. DateTimes are compared in UTC.
        """
        start: LocalDate = self._start
        end: LocalDate = self._end
        if isinstance(start, DateTime) and isinstance(end, DateTime):
            start = start.to_utc()
            end = end.to_utc()

        months = (end.year - start.year) * 12 + (end.month - start.month)
        anchor = start.plus_months(months)
        if _total_millis(anchor) > _total_millis(end):
            months -= 1
            anchor = start.plus_months(months)

        remaining = _total_millis(end) - _total_millis(anchor)
        days, remaining = divmod(remaining, MILLIS_PER_DAY)
        hours, remaining = divmod(remaining, MILLIS_PER_HOUR)
        minutes, remaining = divmod(remaining, MILLIS_PER_MINUTE)
        seconds, millis = divmod(remaining, MILLIS_PER_SECOND)

        years, months = divmod(months, 12)
        return Period(
            years=years,
            months=months,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            millis=millis,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"


def _total_millis(value: LocalDate) -> int:
    # Wall-clock position, so DateTimes must already share an offset
    return value._days * MILLIS_PER_DAY + value._millis_of_day


__all__ = ["Interval"]
