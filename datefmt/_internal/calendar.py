"""Calendar utilities for datefmt.

This module provides internal functions for calendar calculations on the
proleptic Gregorian calendar. Dates are counted as days relative to the
Unix epoch:

    day 0 = 1970-01-01 (a Thursday)

This module is not part of the public API.
"""

from __future__ import annotations

from datefmt._internal.constants import DAYS_IN_MONTH


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def days_in_year(year: int) -> int:
    """Return 366 for leap years, 365 otherwise."""
    return 366 if is_leap_year(year) else 365


def days_from_civil(year: int, month: int, day: int) -> int:
    """Convert a calendar date to days since 1970-01-01.

    Uses the era-based algorithm (400-year cycles starting on March 1),
    which is exact for negative years as well.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2000, 3, 1)
        11017
    """
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400  # [0, 399]
    mp = (month + 9) % 12  # March = 0
    doy = (153 * mp + 2) // 5 + day - 1  # [0, 365]
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy  # [0, 146096]
    return era * 146097 + doe - 719468


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Convert days since 1970-01-01 to (year, month, day).

    The inverse of days_from_civil().

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
    """
    z = days + 719468
    era = z // 146097
    doe = z - era * 146097
    yoe = (doe - doe // 1460 + doe // 36524 - doe // 146096) // 365
    doy = doe - (365 * yoe + yoe // 4 - yoe // 100)
    mp = (5 * doy + 2) // 153
    day = doy - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = yoe + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def day_of_year(year: int, month: int, day: int) -> int:
    """Return the 1-based ordinal day within the year."""
    return days_from_civil(year, month, day) - days_from_civil(year, 1, 1) + 1


def day_of_week(days: int) -> int:
    """Return the weekday of an epoch day, Monday = 0 through Sunday = 6."""
    # 1970-01-01 was a Thursday
    return (days + 3) % 7


__all__ = [
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "days_from_civil",
    "civil_from_days",
    "day_of_year",
    "day_of_week",
]
