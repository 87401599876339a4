"""Timezone representation using a fixed UTC offset.

This module provides the Timezone class. Only numeric offsets are
supported; there is no timezone database and zone names are never parsed.
"""

from __future__ import annotations

import re
from typing import ClassVar

from datefmt._internal.constants import MAX_OFFSET_MINUTES
from datefmt.errors import TimezoneError

_OFFSET_RE = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


class Timezone:
    """A timezone represented as a UTC offset in minutes.

    Positive offsets are east of UTC (ahead in time), negative offsets
    are west of UTC.

    Examples:
        >>> Timezone.utc().is_utc
        True

        >>> Timezone.from_hours(5, 30).offset_minutes
        330

        >>> Timezone.from_string("-0500").offset_minutes
        -300
    """

    __slots__ = ("_offset_minutes",)

    _utc_instance: ClassVar[Timezone | None] = None

    def __init__(self, offset_minutes: int) -> None:
        """Create a Timezone with the specified UTC offset.

        Raises:
            TimezoneError: If the offset is not an integer or is outside
                -14:00 to +14:00.
        """
        if isinstance(offset_minutes, bool) or not isinstance(offset_minutes, int):
            raise TimezoneError(
                f"offset_minutes must be an integer, got {type(offset_minutes).__name__}"
            )

        if abs(offset_minutes) > MAX_OFFSET_MINUTES:
            raise TimezoneError(
                f"offset_minutes {offset_minutes} is outside valid range "
                f"[-{MAX_OFFSET_MINUTES}, {MAX_OFFSET_MINUTES}]"
            )

        self._offset_minutes: int = offset_minutes

    @classmethod
    def utc(cls) -> Timezone:
        """Return the UTC timezone (a shared instance)."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> Timezone:
        """Create a Timezone from hours and minutes offset.

        Args:
            hours: Hour component of offset. Its sign gives the direction.
            minutes: Minute component (0-59), always non-negative.

        Examples:
            >>> Timezone.from_hours(-5).offset_minutes
            -300
        """
        if minutes < 0 or minutes > 59:
            raise TimezoneError(f"minutes must be 0-59, got {minutes}")

        if hours >= 0:
            return cls(hours * 60 + minutes)
        return cls(hours * 60 - minutes)

    @classmethod
    def from_string(cls, s: str) -> Timezone:
        """Parse a timezone string into a Timezone instance.

        Supported formats:
            - "Z", "z" or "UTC"
            - "+HH:MM" / "-HH:MM"
            - "+HHMM" / "-HHMM"
            - "+HH" / "-HH"

        Raises:
            TimezoneError: If the string cannot be parsed.
        """
        if not isinstance(s, str):
            raise TimezoneError(f"Expected string, got {type(s).__name__}")

        s = s.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_RE.match(s)
        if not match:
            raise TimezoneError(f"Cannot parse timezone string: {s!r}")

        sign_str, hours_str, minutes_str = match.groups()
        minutes = int(minutes_str) if minutes_str else 0
        if minutes > 59:
            raise TimezoneError(f"Offset minutes out of range: {s!r}")

        total = int(hours_str) * 60 + minutes
        return cls(total if sign_str == "+" else -total)

    @property
    def offset_minutes(self) -> int:
        """Return the UTC offset in minutes."""
        return self._offset_minutes

    @property
    def is_utc(self) -> bool:
        """Return True if the offset is zero."""
        return self._offset_minutes == 0

    def format_offset(self, extended: bool = True) -> str:
        """Render the offset as "+HH:MM" (extended) or "+HHMM" (basic).

        UTC renders as "+00:00" / "+0000"; the "Z" shorthand is the
        formatter's business, not the timezone's.
        """
        return format_offset(self._offset_minutes, extended)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timezone):
            return NotImplemented
        return self._offset_minutes == other._offset_minutes

    def __hash__(self) -> int:
        return hash(self._offset_minutes)

    def __repr__(self) -> str:
        return f"Timezone(offset_minutes={self._offset_minutes})"

    def __str__(self) -> str:
        """Return "UTC" or the extended offset such as "+05:30"."""
        if self._offset_minutes == 0:
            return "UTC"
        return self.format_offset()


def format_offset(offset_minutes: int, extended: bool = True) -> str:
    """Render a signed offset in minutes as "+HH:MM" or "+HHMM"."""
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    if extended:
        return f"{sign}{hours:02d}:{minutes:02d}"
    return f"{sign}{hours:02d}{minutes:02d}"


__all__ = ["Timezone", "format_offset"]
