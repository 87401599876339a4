"""Parse engine: text to instant.

A formatter's segments are turned into one regular expression, one named
group per token. The match decides the outcome:

    - no match at all                      NoMatchError
    - the whole text matched (a trailing
      "Z" may be left over) but the fields
      name no real date or time            InvalidDateError
    - only a prefix of the text matched    None (a partial match)
    - the whole text matched               the instant

Tokens are read by letter and count, the same way they print. Numeric
fields followed directly by another numeric field read exactly as many
digits as the token has letters ("yyyyMMdd" reads 4, 2 and then up to 9
digits); otherwise they read between one and nine digits, or the letter
count if that is larger. Text fields read the full names at four or more
letters and the short names below.

Without a formatter, ``parse`` tries every registry formatter in
declaration order and returns the first instant, or None.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass
from typing import Iterator, overload

from datefmt._internal.calendar import day_of_week, days_from_civil
from datefmt._internal.constants import DEFAULT_PARSE_YEAR
from datefmt._internal.validation import validate_day_of_year
from datefmt.core.date import LocalDate
from datefmt.core.datetime import DateTime, LocalDateTime
from datefmt.errors import (
    DateFormatError,
    InvalidDateError,
    NoMatchError,
    ValidationError,
)
from datefmt.format.formatter import Formatter, InstantKind, as_kind
from datefmt.format.offset import timezone_adjustment
from datefmt.format.pattern import Segment, SegmentKind
from datefmt.format.tokens import YEAR_LETTERS, is_numeric_token, ordinal_suffix
from datefmt.format.unparse import check_implemented
from datefmt.units.names import NameTable
from datefmt.units.timezone import Timezone

logger = logging.getLogger(__name__)

_ZONE_RE = r"Z|[+-]\d{2}:?\d{2}"

# Year letters that read a sign
_SIGNED_LETTERS = frozenset("yx")

# Widest digit run a free-standing numeric field reads
_MAX_DIGITS = 9

# Number letter to the field it fills
_FIELDS = {
    "C": "century",
    "y": "year",
    "Y": "year_of_era",
    "x": "year",
    "w": "week",
    "e": "iso_weekday",
    "D": "day_of_year",
    "M": "month",
    "d": "day",
    "K": "half_day_hour",
    "h": "clock_hour",
    "H": "hour",
    "k": "clock_hour_of_day",
    "m": "minute",
    "s": "second",
    "S": "millisecond",
}


@dataclass(frozen=True)
class ParseAttempt:
    """The outcome of one registry formatter during a guessing parse.

    Attributes:
        name: Registry name of the formatter.
        value: The parsed instant, or None.
        failure: The error kind when parsing failed, "partial-match" when
            only a prefix matched, None on success.
    """

    name: str
    value: LocalDate | None
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def _is_numeric(segment: Segment | None) -> bool:
    if segment is None:
        return False
    if segment.kind is SegmentKind.STANDARD:
        return is_numeric_token(segment.text)
    return segment.kind is SegmentKind.CUSTOM and segment.text == "dth"


def _alternation(names: tuple[str, ...]) -> str:
    ordered = sorted(names, key=len, reverse=True)
    return "(?i:" + "|".join(re.escape(name) for name in ordered) + ")"


def _text_names(key: str, names: NameTable) -> tuple[str, ...] | None:
    full = len(key) >= 4
    if key[0] == "E":
        return names.weekdays if full else names.weekdays_short
    if key[0] == "M":
        return names.months if full else names.months_short
    if key[0] == "G":
        return names.eras if full else names.eras_short
    return None


def _token_regex(key: str, following: Segment | None, names: NameTable) -> str:
    if is_numeric_token(key):
        count = len(key)
        sign = "-?" if key[0] in _SIGNED_LETTERS and count != 2 else ""
        if _is_numeric(following):
            return rf"{sign}\d{{{count}}}"
        return rf"{sign}\d{{1,{max(count, _MAX_DIGITS)}}}"
    if key == "dth":
        return r"\d{1,2}(?i:st|nd|rd|th)"
    text_names = _text_names(key, names)
    if text_names is not None:
        return _alternation(text_names)
    if key[0] in ("a", "A"):
        return "(?i:am|pm)"
    if key[0] == "Z":
        return _ZONE_RE
    raise NoMatchError(f"token {key!r} cannot be parsed")


@functools.lru_cache(maxsize=256)
def _shape(
    segments: tuple[Segment, ...], names: NameTable
) -> tuple[re.Pattern[str], tuple[tuple[str, str], ...]]:
    """Build the regex for a compiled pattern and its (group, key) pairs."""
    parts: list[str] = []
    groups: list[tuple[str, str]] = []
    for index, segment in enumerate(segments):
        if segment.kind is SegmentKind.LITERAL:
            parts.append(re.escape(segment.text))
            continue
        following = segments[index + 1] if index + 1 < len(segments) else None
        group = f"g{index}"
        parts.append(f"(?P<{group}>{_token_regex(segment.text, following, names)})")
        groups.append((group, segment.text))
    return re.compile("".join(parts)), tuple(groups)


def _name_index(candidates: tuple[str, ...], text: str) -> int:
    lowered = text.lower()
    for index, candidate in enumerate(candidates):
        if candidate.lower() == lowered:
            return index
    raise ValidationError(f"unknown name {text!r}")


def _read_fields(
    match: re.Match[str], groups: tuple[tuple[str, str], ...], names: NameTable
) -> dict[str, object]:
    fields: dict[str, object] = {}
    for group, key in groups:
        raw = match.group(group)
        letter = key[0]
        if key == "dth":
            day = int(raw[:-2])
            if raw[-2:].lower() != ordinal_suffix(day):
                raise ValidationError(f"{raw!r} has the wrong ordinal suffix")
            fields["day"] = day
        elif is_numeric_token(key):
            if letter in YEAR_LETTERS and len(key) == 2:
                fields["two_digit_year"] = int(raw)
            else:
                fields[_FIELDS[letter]] = int(raw)
        elif letter == "E":
            fields["weekday"] = _name_index(_text_names(key, names), raw)  # type: ignore[arg-type]
        elif letter == "M":
            fields["month"] = _name_index(_text_names(key, names), raw) + 1  # type: ignore[arg-type]
        elif letter == "G":
            fields["era"] = _name_index(_text_names(key, names), raw)  # type: ignore[arg-type]
        elif letter in ("a", "A"):
            fields["pm"] = raw.lower() == "pm"
        elif letter == "Z":
            fields["offset"] = raw
    return fields


def resolve_two_digit_year(
    two_digit_year: int, pivot_year: int | None = None, current_year: int | None = None
) -> int:
    """Expand a two-digit year into a full year.

    With a pivot the result lies in pivot - 50 to pivot + 49; without one
    it lies between 80 years before and 20 years after the current year.

    Examples:
        >>> resolve_two_digit_year(10, pivot_year=2000)
        2010
        >>> resolve_two_digit_year(50, pivot_year=2000)
        1950
    """
    if pivot_year is not None:
        low = pivot_year - 50
    else:
        if current_year is None:
            current_year = DateTime.utc_now().year
        low = current_year - 80
    year = low - low % 100 + two_digit_year
    if year < low:
        year += 100
    return year


def _year_of_era(fields: dict[str, object], fmt: Formatter) -> int:
    if "year_of_era" in fields:
        return fields["year_of_era"]  # type: ignore[return-value]
    century = fields.get("century")
    if "two_digit_year" in fields:
        if century is not None:
            return century * 100 + fields["two_digit_year"]  # type: ignore[operator]
        return resolve_two_digit_year(fields["two_digit_year"], fmt.pivot_year)  # type: ignore[arg-type]
    if century is not None:
        return century * 100  # type: ignore[operator]
    if fmt.default_year is not None:
        return fmt.default_year
    return DEFAULT_PARSE_YEAR


def _resolve_year(fields: dict[str, object], fmt: Formatter) -> int:
    if "year" in fields:
        return fields["year"]  # type: ignore[return-value]
    year = _year_of_era(fields, fmt)
    # 1 BC is year 0
    if fields.get("era") == 0:
        return 1 - year
    return year


def _resolve_date(fields: dict[str, object], year: int) -> LocalDate:
    if "month" in fields or "day" in fields:
        return LocalDate(year, fields.get("month", 1), fields.get("day", 1))  # type: ignore[arg-type]
    if "day_of_year" in fields:
        return LocalDate.from_day_of_year(year, fields["day_of_year"])  # type: ignore[arg-type]
    if "week" in fields:
        week = fields["week"]
        if week < 1 or week > 53:  # type: ignore[operator]
            raise ValidationError(f"week must be between 1 and 53, got {week}")
        start = (week - 1) * 7 + 1  # type: ignore[operator]
        day_of_year = start
        if "iso_weekday" in fields or "weekday" in fields:
            if "iso_weekday" in fields:
                weekday = fields["iso_weekday"] - 1  # type: ignore[operator]
            else:
                weekday = fields["weekday"]
            if weekday < 0 or weekday > 6:
                raise ValidationError(f"day of week must be between 1 and 7, got {weekday + 1}")
            first = days_from_civil(year, 1, 1) + start - 1
            day_of_year = start + (weekday - day_of_week(first)) % 7
        validate_day_of_year(year, day_of_year)
        return LocalDate.from_day_of_year(year, day_of_year)
    return LocalDate(year, 1, 1)


def _resolve_hour(fields: dict[str, object]) -> int:
    if "hour" in fields:
        return fields["hour"]  # type: ignore[return-value]
    pm = 12 if fields.get("pm") else 0
    if "clock_hour_of_day" in fields:
        hour = fields["clock_hour_of_day"]
        if hour < 1 or hour > 24:  # type: ignore[operator]
            raise ValidationError(f"clock hour of day must be between 1 and 24, got {hour}")
        return hour % 24  # type: ignore[operator]
    if "half_day_hour" in fields:
        hour = fields["half_day_hour"]
        if hour < 0 or hour > 11:  # type: ignore[operator]
            raise ValidationError(f"hour of halfday must be between 0 and 11, got {hour}")
        return hour + pm  # type: ignore[operator]
    if "clock_hour" in fields:
        clock_hour = fields["clock_hour"]
        if clock_hour < 1 or clock_hour > 12:  # type: ignore[operator]
            raise ValidationError(f"clock hour must be between 1 and 12, got {clock_hour}")
        return clock_hour % 12 + pm  # type: ignore[operator]
    return 0


def _build(fields: dict[str, object], fmt: Formatter) -> LocalDate:
    """Build the instant of the formatter's kind from parsed fields."""
    year = _resolve_year(fields, fmt)
    date = _resolve_date(fields, year)
    if fmt.kind is InstantKind.DATE:
        return date

    clock = (
        _resolve_hour(fields),
        fields.get("minute", 0),
        fields.get("second", 0),
        fields.get("millisecond", 0),
    )
    if fmt.kind is InstantKind.LOCAL:
        return LocalDateTime(date.year, date.month, date.day, *clock)  # type: ignore[arg-type]

    offset = fields.get("offset")
    if offset is None:
        return DateTime(date.year, date.month, date.day, *clock, timezone=fmt.zone)  # type: ignore[arg-type]
    read_as_utc = DateTime(date.year, date.month, date.day, *clock, timezone=Timezone.utc())  # type: ignore[arg-type]
    return timezone_adjustment(read_as_utc, offset).astimezone(fmt.zone)  # type: ignore[arg-type]


def _parse(fmt: Formatter, text: str) -> LocalDate | None:
    check_implemented(fmt)
    if not text:
        raise NoMatchError(f"empty text does not match {fmt.pattern!r}")

    regex, groups = _shape(fmt.segments, fmt.names)
    match = regex.fullmatch(text)
    if match is None and text.endswith("Z"):
        match = regex.fullmatch(text, 0, len(text) - 1)

    if match is None:
        prefix = regex.match(text)
        if prefix is None or prefix.end() == 0:
            raise NoMatchError(f"{text!r} does not match {fmt.pattern!r}")
        logger.debug(
            "%r only matched %d of %d characters of %r",
            fmt.pattern,
            prefix.end(),
            len(text),
            text,
        )
        return None

    try:
        return _build(_read_fields(match, groups, fmt.names), fmt)
    except ValidationError as e:
        raise InvalidDateError(f"{text!r} is not a valid date for {fmt.pattern!r}: {e}") from e


def _attempts(text: str, kind: InstantKind) -> Iterator[ParseAttempt]:
    from datefmt.format.registry import FORMATTERS

    for name, fmt in FORMATTERS.items():
        try:
            value = _parse(as_kind(fmt, kind), text)
        except DateFormatError as e:
            logger.debug("%s did not parse %r: %s", name, text, e)
            yield ParseAttempt(name, None, e.kind)
            continue
        yield ParseAttempt(name, value, None if value is not None else "partial-match")


def _guess(text: str, kind: InstantKind) -> LocalDate | None:
    for attempt in _attempts(text, kind):
        if attempt.ok:
            logger.debug("%r parsed with %s", text, attempt.name)
            return attempt.value
    return None


def parse_attempts(text: str, kind: InstantKind = InstantKind.UTC) -> list[ParseAttempt]:
    """Try every registry formatter and report each outcome.

    Unlike the guessing ``parse``, this does not stop at the first
    success.

    Examples:
        >>> [a.name for a in parse_attempts("2010-10-03") if a.ok][:2]
        ['date', 'year_month_day']
    """
    return list(_attempts(text, kind))


@overload
def parse(fmt: Formatter, text: str) -> LocalDate | None: ...


@overload
def parse(fmt: str) -> LocalDate | None: ...


def parse(fmt: Formatter | str, text: str | None = None) -> LocalDate | None:
    """Parse text with a formatter, or guess the formatter.

    Args:
        fmt: A Formatter; or, when called with a single argument, the
            text to parse with every registry formatter in turn.
        text: The text to parse.

    Returns:
        The instant (of the formatter's kind), or None when only a prefix
        of the text matched. Guessing returns None when no formatter
        matched.

    Raises:
        NotImplementedFormatError: If the formatter is a placeholder.
        NoMatchError: If the text does not have the pattern's shape.
        InvalidDateError: If the text has the shape but no valid date.

    Examples:
        >>> from datefmt.format.formatter import formatter
        >>> parse(formatter("yyyyMMdd"), "20100311")
        DateTime(2010, 3, 11, 0, 0, 0, 0, timezone=+00:00)
        >>> parse("2010-10-03T10:20:30.000Z").minute
        20
    """
    if isinstance(fmt, Formatter):
        if text is None:
            raise TypeError("parse() with a formatter needs the text to parse")
        return _parse(fmt, text)
    return _guess(fmt, InstantKind.UTC)


@overload
def parse_local(fmt: Formatter, text: str) -> LocalDate | None: ...


@overload
def parse_local(fmt: str) -> LocalDate | None: ...


def parse_local(fmt: Formatter | str, text: str | None = None) -> LocalDate | None:
    """Like parse, building zone-naive LocalDateTimes."""
    if isinstance(fmt, Formatter):
        if text is None:
            raise TypeError("parse_local() with a formatter needs the text to parse")
        return _parse(as_kind(fmt, InstantKind.LOCAL), text)
    return _guess(fmt, InstantKind.LOCAL)


@overload
def parse_local_date(fmt: Formatter, text: str) -> LocalDate | None: ...


@overload
def parse_local_date(fmt: str) -> LocalDate | None: ...


def parse_local_date(fmt: Formatter | str, text: str | None = None) -> LocalDate | None:
    """Like parse, building LocalDates; clock and offset fields are dropped."""
    if isinstance(fmt, Formatter):
        if text is None:
            raise TypeError("parse_local_date() with a formatter needs the text to parse")
        return _parse(as_kind(fmt, InstantKind.DATE), text)
    return _guess(fmt, InstantKind.DATE)


__all__ = [
    "ParseAttempt",
    "parse",
    "parse_attempts",
    "parse_local",
    "parse_local_date",
    "resolve_two_digit_year",
]
