"""Weekday and month name tables.

Text tokens (``EEE``, ``EEEE``, ``MMM``, ``MMMM``, ``dow``) read their
names from a NameTable. English is built in; other locales come from the
CLDR data shipped with Babel.
"""

from __future__ import annotations

from dataclasses import dataclass

from babel import Locale, UnknownLocaleError

from datefmt.errors import ValidationError

_ENGLISH_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

_ENGLISH_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


@dataclass(frozen=True)
class NameTable:
    """Full and abbreviated weekday, month and era names.

    Attributes:
        weekdays: Seven full names, Monday first.
        weekdays_short: Seven abbreviated names, Monday first.
        months: Twelve full names, January first.
        months_short: Twelve abbreviated names, January first.
        eras: Full era names, before and after year 1.
        eras_short: Abbreviated era names, in the same order.
        locale: The locale code the names were loaded for.
    """

    weekdays: tuple[str, ...]
    weekdays_short: tuple[str, ...]
    months: tuple[str, ...]
    months_short: tuple[str, ...]
    locale: str = "en"
    eras: tuple[str, ...] = ("Before Christ", "Anno Domini")
    eras_short: tuple[str, ...] = ("BC", "AD")

    def __post_init__(self) -> None:
        if len(self.weekdays) != 7 or len(self.weekdays_short) != 7:
            raise ValidationError("a name table needs exactly 7 weekday names")
        if len(self.months) != 12 or len(self.months_short) != 12:
            raise ValidationError("a name table needs exactly 12 month names")
        if len(self.eras) != 2 or len(self.eras_short) != 2:
            raise ValidationError("a name table needs exactly 2 era names")

    @classmethod
    def english(cls) -> NameTable:
        """Return the built-in English names (3-letter abbreviations)."""
        return cls(
            weekdays=_ENGLISH_WEEKDAYS,
            weekdays_short=tuple(name[:3] for name in _ENGLISH_WEEKDAYS),
            months=_ENGLISH_MONTHS,
            months_short=tuple(name[:3] for name in _ENGLISH_MONTHS),
        )

    @classmethod
    def for_locale(cls, code: str) -> NameTable:
        """Load "format" context names for a locale from CLDR.

        Args:
            code: A locale identifier such as "de_DE" or "fr".

        Raises:
            ValidationError: If Babel does not know the locale.

        Examples:
            >>> NameTable.for_locale("de").months[2]
            'März'
        """
        try:
            locale = Locale.parse(code)
        except (UnknownLocaleError, ValueError) as e:
            raise ValidationError(f"unknown locale {code!r}: {e}") from e

        days = locale.days["format"]
        months = locale.months["format"]
        eras = locale.eras
        return cls(
            weekdays=tuple(days["wide"][i] for i in range(7)),
            weekdays_short=tuple(days["abbreviated"][i] for i in range(7)),
            months=tuple(months["wide"][i] for i in range(1, 13)),
            months_short=tuple(months["abbreviated"][i] for i in range(1, 13)),
            eras=(eras["wide"][0], eras["wide"][1]),
            eras_short=(eras["abbreviated"][0], eras["abbreviated"][1]),
            locale=str(locale),
        )

    def weekday(self, index: int, short: bool = False) -> str:
        """Return the weekday name for index 0 (Monday) to 6 (Sunday)."""
        return (self.weekdays_short if short else self.weekdays)[index]

    def month(self, number: int, short: bool = False) -> str:
        """Return the month name for month number 1 to 12."""
        return (self.months_short if short else self.months)[number - 1]

    def era(self, index: int, short: bool = False) -> str:
        """Return the era name for index 0 (BC) or 1 (AD)."""
        return (self.eras_short if short else self.eras)[index]


ENGLISH: NameTable = NameTable.english()


__all__ = ["ENGLISH", "NameTable"]
