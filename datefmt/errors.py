"""datefmt exception hierarchy.

All datefmt-specific exceptions inherit from DateFormatError. Each class
carries a short ``kind`` string so callers (and the diagnostic parse
helpers) can report a failure without inspecting the class.
"""

from __future__ import annotations

from typing import ClassVar


class DateFormatError(Exception):
    """Base exception for all datefmt errors."""

    kind: ClassVar[str] = "error"


class ValidationError(DateFormatError, ValueError):
    """Invalid input values.

    Raised when a temporal field is out of range or does not name a real
    calendar date.

    Examples:
        - Month value outside 1-12
        - Day 31 in a 30-day month
        - Hour value outside 0-23
    """

    kind: ClassVar[str] = "validation"


class TimezoneError(DateFormatError, ValueError):
    """Invalid timezone offset.

    Examples:
        - Malformed offset string such as "+5:3"
        - Offset outside the valid range (-14h to +14h)
    """

    kind: ClassVar[str] = "bad-timezone"


class PatternError(DateFormatError, ValueError):
    """A pattern string could not be compiled.

    Raised when an unquoted letter does not start any known token.
    """

    kind: ClassVar[str] = "bad-pattern"


class NotImplementedFormatError(DateFormatError, NotImplementedError):
    """A registry formatter that is only a placeholder was used."""

    kind: ClassVar[str] = "not-implemented"


class InstantTypeError(DateFormatError, TypeError):
    """An instant of the wrong concrete type was given to unparse.

    Also raised for ``None``.
    """

    kind: ClassVar[str] = "type-mismatch"


class ParseError(DateFormatError):
    """Failed to parse a string with a formatter."""

    kind: ClassVar[str] = "parse-error"


class InvalidDateError(ParseError):
    """The text has the shape of the pattern but names no real date.

    Example: "20100231" parsed with "yyyyMMdd" (there is no February 31).
    """

    kind: ClassVar[str] = "invalid-date"


class NoMatchError(ParseError):
    """The text does not have the shape of the pattern at all."""

    kind: ClassVar[str] = "parser-no-match"


class UnsupportedTypeError(DateFormatError, TypeError):
    """A value cannot be converted to a field map."""

    kind: ClassVar[str] = "unsupported-type"


__all__ = [
    "DateFormatError",
    "ValidationError",
    "TimezoneError",
    "PatternError",
    "NotImplementedFormatError",
    "InstantTypeError",
    "ParseError",
    "InvalidDateError",
    "NoMatchError",
    "UnsupportedTypeError",
]
