"""datefmt: pattern-driven date/time formatting and parsing.

datefmt converts between instants and text using patterns such as
"yyyy-MM-dd'T'HH:mm:ss.SSSZZ", and ships a registry of named ISO-8601,
RFC-822 and SQL-style formatters.

Instants:
    DateTime: Date and time at a fixed UTC offset
    LocalDateTime: Date and wall-clock time without an offset
    LocalDate: Calendar date
    Period, Interval: Accepted by instant_to_map

Formatting:
    formatter, formatter_local: Build formatters from patterns
    with_default_year, with_zone, with_locale, with_pivot_year: Derive copies
    unparse, unparse_local, unparse_local_date: Instant to text
    parse, parse_local, parse_local_date: Text to instant
    parse_attempts: Every registry formatter's outcome for a text
    timezone_adjustment: Shift an instant by a trailing offset
    FORMATTERS, PARSERS, PRINTERS, show_formatters: The registry

Exceptions:
    DateFormatError: Base exception
    NotImplementedFormatError, InstantTypeError, InvalidDateError,
    NoMatchError, UnsupportedTypeError, PatternError, ValidationError,
    TimezoneError

Example:
    >>> from datefmt import FORMATTERS, DateTime, parse, unparse
    >>> text = unparse(FORMATTERS["date_time"], DateTime(2010, 10, 3, 14, 30))
    >>> text
    '2010-10-03T14:30:00.000Z'
    >>> parse(FORMATTERS["date_time"], text) == DateTime(2010, 10, 3, 14, 30)
    True
"""

from __future__ import annotations

__version__ = "0.1.0"

# Instants
from datefmt.core.date import LocalDate
from datefmt.core.datetime import DateTime, LocalDateTime
from datefmt.core.interval import Interval
from datefmt.core.period import Period

# Units
from datefmt.units.names import NameTable
from datefmt.units.timezone import Timezone

# Exceptions
from datefmt.errors import (
    DateFormatError,
    InstantTypeError,
    InvalidDateError,
    NoMatchError,
    NotImplementedFormatError,
    ParseError,
    PatternError,
    TimezoneError,
    UnsupportedTypeError,
    ValidationError,
)

# Formatting
from datefmt.format import (
    FORMATTERS,
    PARSERS,
    PRINTERS,
    Formatter,
    InstantKind,
    ParseAttempt,
    formatter,
    formatter_local,
    not_implemented,
    parse,
    parse_attempts,
    parse_local,
    parse_local_date,
    show_formatters,
    timezone_adjustment,
    unparse,
    unparse_local,
    unparse_local_date,
    with_default_year,
    with_locale,
    with_pivot_year,
    with_zone,
)
from datefmt.convert import instant_to_map

__all__: list[str] = [
    "__version__",
    # Instants
    "DateTime",
    "Interval",
    "LocalDate",
    "LocalDateTime",
    "Period",
    # Units
    "NameTable",
    "Timezone",
    # Exceptions
    "DateFormatError",
    "InstantTypeError",
    "InvalidDateError",
    "NoMatchError",
    "NotImplementedFormatError",
    "ParseError",
    "PatternError",
    "TimezoneError",
    "UnsupportedTypeError",
    "ValidationError",
    # Formatting
    "FORMATTERS",
    "PARSERS",
    "PRINTERS",
    "Formatter",
    "InstantKind",
    "ParseAttempt",
    "formatter",
    "formatter_local",
    "not_implemented",
    "parse",
    "parse_attempts",
    "parse_local",
    "parse_local_date",
    "show_formatters",
    "timezone_adjustment",
    "unparse",
    "unparse_local",
    "unparse_local_date",
    "with_default_year",
    "with_locale",
    "with_pivot_year",
    "with_zone",
    # Conversion
    "instant_to_map",
]
