"""The token table: pattern token to printing function.

A token is a run of one repeated pattern letter (``yyyy``, ``EEE``, ``SS``),
or one of the named tokens ``dth`` and ``dow``. The letter chooses the field
and the run length chooses the form:

    Number  the minimum number of digits; shorter values are zero-padded
    Year    as Number, except that a run of two prints the year of century
    Text    four or more letters print the full form, fewer the short form
    Month   three or more letters print text, fewer a number
    Zone    Z prints +HHMM, ZZ or more +HH:MM

Pattern letters:
    G           era                      text     AD; Anno Domini
    C           century of era           number   20
    y           year                     year     2010; 10
    Y           year of era              year     2010; 10
    x           week-based year          year     2010
    w           week of year             number   40
    e           ISO day of week          number   7
    E           day of week              text     Sun; Sunday
    D           day of year              number   276
    M           month of year            month    10; Oct; October
    d           day of month             number   3
    a, A        halfday                  text     pm; PM
    K           hour of halfday (0-11)   number   2
    h           clockhour of halfday     number   2
    H           hour of day (0-23)       number   14
    k           clockhour of day (1-24)  number   14
    m           minute of hour           number   5
    s           second of minute         number   9
    S           millisecond              number   7; 007
    Z           offset                   zone     -0530; -05:30

Named tokens:
    dth         day of month with English ordinal suffix (1st, 2nd, ...)
    dow         full weekday name

``w`` is ceil(day of year / 7), not the ISO-8601 week, and ``x`` is the
calendar year. ``y`` and ``x`` may be negative; ``Y`` and ``C`` count
within the era, so 44 BC is ``Y`` 44 with ``G`` BC and ``y`` -43.
Time zone names (``z``) are not supported.

The table holds the common tokens by key; ``printer_for`` resolves any
other run of a known letter from its letter and count.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Mapping

from datefmt.units.names import ENGLISH, NameTable
from datefmt.units.timezone import format_offset

if TYPE_CHECKING:
    from datefmt.core.date import LocalDate

TokenFn = Callable[["LocalDate"], str]
TokenTable = Mapping[str, TokenFn]

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd", 21: "st", 22: "nd", 23: "rd", 31: "st"}

# Letters presented as numbers (M only below three letters)
NUMBER_LETTERS: frozenset[str] = frozenset("CyYxweDMdKhHkmsS")

YEAR_LETTERS: frozenset[str] = frozenset("yYx")

# Text letters and their (short, full) table keys
TEXT_FORMS: Mapping[str, tuple[str, str]] = MappingProxyType(
    {"E": ("EEE", "EEEE"), "M": ("MMM", "MMMM"), "G": ("G", "GGGG")}
)

PATTERN_LETTERS: frozenset[str] = NUMBER_LETTERS | frozenset("EGaAZ")

# Letters reserved by the pattern syntax that cannot be printed or parsed
UNSUPPORTED_LETTERS: Mapping[str, str] = MappingProxyType(
    {"z": "time zone names are not supported"}
)

# Tokens the local formatters render as nothing
ZONE_TOKENS: frozenset[str] = frozenset({"Z", "ZZ"})

_TABLE_NUMBERS = (
    "C", "CC", "y", "yy", "yyyy", "YY", "YYYY", "xxxx", "w", "ww", "e",
    "D", "DD", "DDD", "M", "MM", "d", "dd",
    "K", "KK", "h", "hh", "H", "HH", "k", "kk", "m", "mm", "s", "ss", "S", "SSS",
)


def ordinal_suffix(day: int) -> str:
    """Return the English ordinal suffix for a day of month.

    Examples:
        >>> [ordinal_suffix(d) for d in (1, 2, 3, 4, 11, 22)]
        ['st', 'nd', 'rd', 'th', 'th', 'nd']
    """
    return _ORDINAL_SUFFIXES.get(day, "th")


def week_of_year(day_of_year: int) -> int:
    """Approximate week number: ceil(day_of_year / 7).

    This is not the ISO-8601 week: it ignores which weekday the year
    starts on.
    """
    return math.ceil(day_of_year / 7)


def iso_day_of_week(value: LocalDate) -> int:
    """Return 1 (Monday) through 7 (Sunday)."""
    return value.day_of_week + 1


def year_of_era(year: int) -> int:
    """Return the year counted within its era (1 BC is year 0)."""
    return year if year > 0 else 1 - year


def is_letter_run(token: str) -> bool:
    """Return True if ``token`` is one pattern letter repeated."""
    return bool(token) and not token.strip(token[0])


def is_numeric_token(token: str) -> bool:
    """Return True if ``token`` prints and parses as digits.

    Examples:
        >>> [is_numeric_token(t) for t in ("SS", "MM", "MMM", "dth")]
        [True, True, False, False]
    """
    if not is_letter_run(token):
        return False
    if token[0] == "M":
        return len(token) < 3
    return token[0] in NUMBER_LETTERS


def _clock_hour(value: LocalDate) -> int:
    hour = value.hour % 12
    return 12 if hour == 0 else hour


_NUMBER_FIELDS: dict[str, Callable[[LocalDate], int]] = {
    "C": lambda v: year_of_era(v.year) // 100,
    "y": lambda v: v.year,
    "Y": lambda v: year_of_era(v.year),
    "x": lambda v: v.year,
    "w": lambda v: week_of_year(v.day_of_year),
    "e": iso_day_of_week,
    "D": lambda v: v.day_of_year,
    "M": lambda v: v.month,
    "d": lambda v: v.day,
    "K": lambda v: v.hour % 12,
    "h": _clock_hour,
    "H": lambda v: v.hour,
    "k": lambda v: v.hour or 24,
    "m": lambda v: v.minute,
    "s": lambda v: v.second,
    "S": lambda v: v.millisecond,
}


def _pad(value: int, width: int) -> str:
    if value < 0:
        return "-" + str(-value).zfill(width)
    return str(value).zfill(width)


def number_printer(letter: str, count: int) -> TokenFn:
    """Build the printer for a run of ``count`` number letters.

    Examples:
        >>> from datefmt.core import LocalDate
        >>> number_printer("y", 4)(LocalDate(999, 1, 1))
        '0999'
        >>> number_printer("y", 2)(LocalDate(2005, 1, 1))
        '05'
    """
    field = _NUMBER_FIELDS[letter]
    if letter in YEAR_LETTERS and count == 2:
        return lambda v: f"{field(v) % 100:02d}"
    return lambda v: _pad(field(v), count)


def token_table(names: NameTable = ENGLISH) -> TokenTable:
    """Build a token table whose text tokens read from ``names``.

    Args:
        names: Weekday, month and era names for E, M, G and dow.

    Returns:
        A read-only mapping from token key to printing function.
    """
    table: dict[str, TokenFn] = {
        token: number_printer(token[0], len(token)) for token in _TABLE_NUMBERS
    }
    table.update(
        {
            "dth": lambda v: f"{v.day}{ordinal_suffix(v.day)}",
            "dow": lambda v: names.weekday(v.day_of_week),
            "EEE": lambda v: names.weekday(v.day_of_week, short=True),
            "EEEE": lambda v: names.weekday(v.day_of_week),
            "MMM": lambda v: names.month(v.month, short=True),
            "MMMM": lambda v: names.month(v.month),
            "G": lambda v: names.era(1 if v.year > 0 else 0, short=True),
            "GGGG": lambda v: names.era(1 if v.year > 0 else 0),
            "a": lambda v: "pm" if v.hour >= 12 else "am",
            "A": lambda v: "PM" if v.hour >= 12 else "AM",
            "Z": lambda v: format_offset(v.offset_minutes, extended=False),
            "ZZ": lambda v: format_offset(v.offset_minutes, extended=True),
        }
    )
    return MappingProxyType(table)


def printer_for(table: TokenTable, token: str) -> TokenFn:
    """Return the printer for ``token``: its table entry, or one built from
    its letter and count.

    Text and zone runs reuse the table's own entries, so name tables and
    blanked zone tokens carry over to every run length.

    Raises:
        KeyError: If the token is neither in the table nor a run of a
            pattern letter.

    Examples:
        >>> from datefmt.core import DateTime
        >>> printer_for(DEFAULT_TOKENS, "EEEEE")(DateTime(2010, 10, 3))
        'Sunday'
        >>> printer_for(DEFAULT_TOKENS, "SS")(DateTime(2010, 10, 3, millisecond=7))
        '07'
    """
    printer = table.get(token)
    if printer is not None:
        return printer
    if not is_letter_run(token):
        raise KeyError(token)

    letter, count = token[0], len(token)
    if letter in TEXT_FORMS and not is_numeric_token(token):
        short, full = TEXT_FORMS[letter]
        return table[full if count >= 4 else short]
    if letter in ("a", "A"):
        return table[letter]
    if letter == "Z":
        return table["ZZ"]
    if letter in NUMBER_LETTERS:
        return number_printer(letter, count)
    raise KeyError(token)


def blank_zone_tokens(table: TokenTable) -> TokenTable:
    """Return a copy of ``table`` where Z and ZZ render as empty text."""
    overridden = dict(table)
    for key in ZONE_TOKENS:
        overridden[key] = lambda v: ""
    return MappingProxyType(overridden)


DEFAULT_TOKENS: TokenTable = token_table()
LOCAL_TOKENS: TokenTable = blank_zone_tokens(DEFAULT_TOKENS)


__all__ = [
    "DEFAULT_TOKENS",
    "LOCAL_TOKENS",
    "NUMBER_LETTERS",
    "PATTERN_LETTERS",
    "TEXT_FORMS",
    "UNSUPPORTED_LETTERS",
    "YEAR_LETTERS",
    "ZONE_TOKENS",
    "TokenFn",
    "TokenTable",
    "blank_zone_tokens",
    "is_letter_run",
    "is_numeric_token",
    "iso_day_of_week",
    "number_printer",
    "ordinal_suffix",
    "printer_for",
    "token_table",
    "week_of_year",
    "year_of_era",
]
