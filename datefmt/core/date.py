"""LocalDate class representing a calendar date.

This module provides LocalDate, the date-only instant shape. It is also
the base of the LocalDateTime and DateTime classes, so every instant
exposes the same field accessors to the token table.
"""

from __future__ import annotations

from typing import ClassVar

from datefmt._internal.calendar import (
    civil_from_days,
    day_of_week,
    days_from_civil,
    days_in_month,
)
from datefmt._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_year,
)


class LocalDate:
    """A calendar date in the proleptic Gregorian calendar.

    LocalDate has no clock and no offset: its clock accessors read as zero
    and ``offset_minutes`` is always 0. Internally a date is the number of
    days since 1970-01-01.

    Instances are immutable; arithmetic returns new values.

    Examples:
        >>> d = LocalDate(2010, 10, 3)
        >>> d.day_of_week  # Sunday
        6
        >>> d.day_of_year
        276
        >>> str(d)
        '2010-10-03'
    """

    __slots__ = ("_days",)

    _type: ClassVar[str] = "LocalDate"

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a LocalDate from year, month, and day.

        Raises:
            ValidationError: If any component is out of range.

        Examples:
            >>> LocalDate(2010, 2, 31)
            Traceback (most recent call last):
            ...
            ValidationError: day must be between 1 and 28 for 2010-02, got 31
        """
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        self._days = days_from_civil(year, month, day)

    @classmethod
    def _from_days(cls, days: int) -> LocalDate:
        """Create a LocalDate directly from an epoch day count."""
        result = object.__new__(cls)
        result._days = days
        return result

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> LocalDate:
        """Create a LocalDate from a year and a 1-based ordinal day.

        Examples:
            >>> LocalDate.from_day_of_year(2010, 32)
            LocalDate(2010, 2, 1)
        """
        validate_year(year)
        validate_day_of_year(year, day_of_year)
        return cls._from_days(days_from_civil(year, 1, 1) + day_of_year - 1)

    @property
    def year(self) -> int:
        return civil_from_days(self._days)[0]

    @property
    def month(self) -> int:
        return civil_from_days(self._days)[1]

    @property
    def day(self) -> int:
        return civil_from_days(self._days)[2]

    @property
    def day_of_week(self) -> int:
        """Return the day of week, Monday = 0 through Sunday = 6."""
        return day_of_week(self._days)

    @property
    def day_of_year(self) -> int:
        """Return the 1-based ordinal day within the year."""
        return self._days - days_from_civil(self.year, 1, 1) + 1

    @property
    def hour(self) -> int:
        return 0

    @property
    def minute(self) -> int:
        return 0

    @property
    def second(self) -> int:
        return 0

    @property
    def millisecond(self) -> int:
        return 0

    @property
    def offset_minutes(self) -> int:
        """Dates carry no offset."""
        return 0

    @property
    def _millis_of_day(self) -> int:
        return 0

    def date(self) -> LocalDate:
        """Return the date part as a LocalDate."""
        return LocalDate._from_days(self._days)

    def plus_days(self, days: int) -> LocalDate:
        """Return a new value shifted by a number of days."""
        return self._with_internal(self._days + days, self._millis_of_day)

    def plus_months(self, months: int) -> LocalDate:
        """Return a new value shifted by calendar months.

        The day is clamped to the end of the target month.

        Examples:
            >>> LocalDate(2024, 1, 31).plus_months(1)
            LocalDate(2024, 2, 29)
        """
        year, month, day = civil_from_days(self._days)
        total = year * 12 + (month - 1) + months
        year, month = divmod(total, 12)
        month += 1
        day = min(day, days_in_month(year, month))
        return self._with_internal(days_from_civil(year, month, day), self._millis_of_day)

    def _with_internal(self, days: int, millis: int) -> LocalDate:
        """Return a value of the same shape from internal fields.

        Dates ignore ``millis``; subclasses keep it (and their offset).
        """
        return type(self)._from_days(days)

    def to_iso_format(self) -> str:
        """Return the date as YYYY-MM-DD."""
        year, month, day = civil_from_days(self._days)
        if year < 0:
            return f"-{-year:04d}-{month:02d}-{day:02d}"
        return f"{year:04d}-{month:02d}-{day:02d}"

    def _sort_key(self) -> tuple[int, ...]:
        return (self._days,)

    def __eq__(self, other: object) -> bool:
        """Values are equal only when they are of the same shape.

        Examples:
            >>> LocalDate(2010, 10, 3) == LocalDate(2010, 10, 3)
            True
        """
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() == other._sort_key()  # type: ignore[attr-defined]

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() < other._sort_key()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() <= other._sort_key()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() > other._sort_key()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._sort_key() >= other._sort_key()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self._type, self._sort_key()))

    def __repr__(self) -> str:
        year, month, day = civil_from_days(self._days)
        return f"LocalDate({year}, {month}, {day})"

    def __str__(self) -> str:
        return self.to_iso_format()


__all__ = ["LocalDate"]
