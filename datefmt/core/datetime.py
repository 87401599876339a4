"""LocalDateTime and DateTime classes.

LocalDateTime is a zone-naive date and wall-clock time with millisecond
precision. DateTime adds a fixed UTC offset; it is the instant shape that
the default (UTC) formatters read and build.
"""

from __future__ import annotations

import time as _time
from typing import ClassVar

from datefmt._internal.calendar import civil_from_days
from datefmt._internal.constants import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
)
from datefmt._internal.validation import validate_range
from datefmt.core.date import LocalDate
from datefmt.units.timezone import Timezone


class LocalDateTime(LocalDate):
    """A date and wall-clock time without an offset.

    Attributes:
        hour: Hour of day (0-23).
        minute: Minute (0-59).
        second: Second (0-59).
        millisecond: Millisecond (0-999).

    Examples:
        >>> ldt = LocalDateTime(2010, 10, 3, 14, 5)
        >>> ldt.hour, ldt.minute
        (14, 5)
        >>> str(ldt.plus_minutes(-5))
        '2010-10-03T14:00:00.000'
    """

    __slots__ = ("_millis",)

    _type: ClassVar[str] = "LocalDateTime"

    @validate_range(hour=(0, 23), minute=(0, 59), second=(0, 59), millisecond=(0, 999))
    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
    ) -> None:
        super().__init__(year, month, day)
        self._millis = (
            hour * MILLIS_PER_HOUR
            + minute * MILLIS_PER_MINUTE
            + second * MILLIS_PER_SECOND
            + millisecond
        )

    @classmethod
    def _from_internal(cls, days: int, millis: int) -> LocalDateTime:
        """Create from epoch days and milliseconds of day, normalising carry."""
        extra_days, millis = divmod(millis, MILLIS_PER_DAY)
        result = object.__new__(cls)
        result._days = days + extra_days
        result._millis = millis
        return result

    @classmethod
    def _from_days(cls, days: int) -> LocalDateTime:
        return cls._from_internal(days, 0)

    @property
    def hour(self) -> int:
        return self._millis // MILLIS_PER_HOUR

    @property
    def minute(self) -> int:
        return (self._millis % MILLIS_PER_HOUR) // MILLIS_PER_MINUTE

    @property
    def second(self) -> int:
        return (self._millis % MILLIS_PER_MINUTE) // MILLIS_PER_SECOND

    @property
    def millisecond(self) -> int:
        return self._millis % MILLIS_PER_SECOND

    @property
    def _millis_of_day(self) -> int:
        return self._millis

    def _with_internal(self, days: int, millis: int) -> LocalDateTime:
        return type(self)._from_internal(days, millis)

    def plus_minutes(self, minutes: int) -> LocalDateTime:
        """Return a new value shifted by a number of minutes."""
        return self.plus_millis(minutes * MILLIS_PER_MINUTE)

    def plus_millis(self, millis: int) -> LocalDateTime:
        """Return a new value shifted by a number of milliseconds."""
        return self._with_internal(self._days, self._millis + millis)

    def to_local(self) -> LocalDateTime:
        """Return the wall-clock fields as a LocalDateTime."""
        return LocalDateTime._from_internal(self._days, self._millis)

    def _clock_iso(self) -> str:
        return (
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            f".{self.millisecond:03d}"
        )

    def to_iso_format(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.mmm."""
        return f"{super().to_iso_format()}T{self._clock_iso()}"

    def _sort_key(self) -> tuple[int, ...]:
        return (self._days, self._millis)

    def __repr__(self) -> str:
        year, month, day = civil_from_days(self._days)
        return (
            f"{type(self).__name__}({year}, {month}, {day}, {self.hour}, "
            f"{self.minute}, {self.second}, {self.millisecond})"
        )


class DateTime(LocalDateTime):
    """A date and time at a fixed UTC offset.

    The wall-clock fields are stored as seen in the timezone; two
    DateTimes are equal when they denote the same absolute moment,
    whatever their offsets.

    Examples:
        >>> dt = DateTime(2010, 10, 3, 12, 0, timezone=Timezone.from_hours(2))
        >>> dt.offset_minutes
        120
        >>> dt.to_utc().hour
        10
        >>> dt == dt.to_utc()
        True
    """

    __slots__ = ("_tz",)

    _type: ClassVar[str] = "DateTime"

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        millisecond: int = 0,
        *,
        timezone: Timezone | None = None,
    ) -> None:
        super().__init__(year, month, day, hour, minute, second, millisecond)
        self._tz = timezone if timezone is not None else Timezone.utc()

    @classmethod
    def _from_internal(
        cls, days: int, millis: int, timezone: Timezone | None = None
    ) -> DateTime:
        result = super()._from_internal(days, millis)
        result._tz = timezone if timezone is not None else Timezone.utc()
        return result  # type: ignore[return-value]

    @classmethod
    def utc_now(cls) -> DateTime:
        """Return the current moment in UTC, truncated to milliseconds."""
        return cls.from_unix_millis(_time.time_ns() // 1_000_000)

    @classmethod
    def from_unix_millis(cls, millis: int, *, timezone: Timezone | None = None) -> DateTime:
        """Create a DateTime from milliseconds since the Unix epoch.

        Examples:
            >>> DateTime.from_unix_millis(0)
            DateTime(1970, 1, 1, 0, 0, 0, 0, timezone=+00:00)
        """
        tz = timezone if timezone is not None else Timezone.utc()
        return cls._from_internal(0, millis + tz.offset_minutes * MILLIS_PER_MINUTE, tz)

    @property
    def timezone(self) -> Timezone:
        return self._tz

    @property
    def offset_minutes(self) -> int:
        return self._tz.offset_minutes

    def _with_internal(self, days: int, millis: int) -> DateTime:
        return type(self)._from_internal(days, millis, self._tz)

    def to_unix_millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        return (
            self._days * MILLIS_PER_DAY
            + self._millis
            - self._tz.offset_minutes * MILLIS_PER_MINUTE
        )

    def astimezone(self, timezone: Timezone) -> DateTime:
        """Return the same moment expressed at another offset.

        Examples:
            >>> dt = DateTime(2010, 10, 3, 23, 30)
            >>> str(dt.astimezone(Timezone.from_hours(1)))
            '2010-10-04T00:30:00.000+01:00'
        """
        return DateTime.from_unix_millis(self.to_unix_millis(), timezone=timezone)

    def to_utc(self) -> DateTime:
        """Return the same moment at offset zero."""
        return self.astimezone(Timezone.utc())

    def replace_timezone(self, timezone: Timezone) -> DateTime:
        """Keep the wall-clock fields and attach another offset."""
        return DateTime._from_internal(self._days, self._millis, timezone)

    def to_iso_format(self) -> str:
        """Return YYYY-MM-DDTHH:MM:SS.mmm followed by the offset."""
        offset = "Z" if self._tz.is_utc else self._tz.format_offset()
        return f"{super().to_iso_format()}{offset}"

    def _sort_key(self) -> tuple[int, ...]:
        return (self.to_unix_millis(),)

    def __repr__(self) -> str:
        year, month, day = civil_from_days(self._days)
        return (
            f"DateTime({year}, {month}, {day}, {self.hour}, {self.minute}, "
            f"{self.second}, {self.millisecond}, timezone={self._tz.format_offset()})"
        )


__all__ = ["LocalDateTime", "DateTime"]
