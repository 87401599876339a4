"""The registry of named formatters.

Names follow the ISO-8601 families (basic and extended date, time,
date-time, ordinal date and week date) plus ``rfc822`` and ``mysql``.
Some names are placeholders built with ``not_implemented``: they form
PARSERS, and using them raises NotImplementedFormatError. Every other
name is in PRINTERS and works in both directions.

Guessing parse walks FORMATTERS in declaration order, so the order below
is significant.
"""

from __future__ import annotations

import sys
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping, TextIO

from datefmt.format.formatter import Formatter, formatter, not_implemented

if TYPE_CHECKING:
    from datefmt.core.date import LocalDate

FORMATTERS: Mapping[str, Formatter] = MappingProxyType(
    {
        "basic_date": formatter("yyyyMMdd"),
        "basic_date_time": formatter("yyyyMMdd'T'HHmmss.SSSZ"),
        "basic_date_time_no_ms": formatter("yyyyMMdd'T'HHmmssZ"),
        "basic_ordinal_date": formatter("yyyyDDD"),
        "basic_ordinal_date_time": formatter("yyyyDDD'T'HHmmss.SSSZ"),
        "basic_ordinal_date_time_no_ms": formatter("yyyyDDD'T'HHmmssZ"),
        "basic_time": formatter("HHmmss.SSSZ"),
        "basic_time_no_ms": formatter("HHmmssZ"),
        "basic_t_time": formatter("'T'HHmmss.SSSZ"),
        "basic_t_time_no_ms": formatter("'T'HHmmssZ"),
        "basic_week_date": formatter("xxxx'W'wwe"),
        "basic_week_date_time": formatter("xxxx'W'wwe'T'HHmmss.SSSZ"),
        "basic_week_date_time_no_ms": formatter("xxxx'W'wwe'T'HHmmssZ"),
        "date": formatter("yyyy-MM-dd"),
        "date_element_parser": not_implemented("dateElementParser"),
        "date_hour": formatter("yyyy-MM-dd'T'HH"),
        "date_hour_minute": formatter("yyyy-MM-dd'T'HH:mm"),
        "date_hour_minute_second": formatter("yyyy-MM-dd'T'HH:mm:ss"),
        "date_hour_minute_second_fraction": formatter("yyyy-MM-dd'T'HH:mm:ss.SSS"),
        "date_hour_minute_second_ms": formatter("yyyy-MM-dd'T'HH:mm:ss.SSS"),
        "date_opt_time": not_implemented("dateOptionalTimeParser"),
        "date_parser": not_implemented("dateParser"),
        "date_time": formatter("yyyy-MM-dd'T'HH:mm:ss.SSSZZ"),
        "date_time_no_ms": formatter("yyyy-MM-dd'T'HH:mm:ssZZ"),
        "date_time_parser": not_implemented("dateTimeParser"),
        "hour": formatter("HH"),
        "hour_minute": formatter("HH:mm"),
        "hour_minute_second": formatter("HH:mm:ss"),
        "hour_minute_second_fraction": formatter("HH:mm:ss.SSS"),
        "hour_minute_second_ms": formatter("HH:mm:ss.SSS"),
        "local_date_opt_time": not_implemented("localDateOptionalTimeParser"),
        "local_date": not_implemented("localDateParser"),
        "local_time": not_implemented("localTimeParser"),
        "ordinal_date": formatter("yyyy-DDD"),
        "ordinal_date_time": formatter("yyyy-DDD'T'HH:mm:ss.SSSZZ"),
        "ordinal_date_time_no_ms": formatter("yyyy-DDD'T'HH:mm:ssZZ"),
        "time": formatter("HH:mm:ss.SSSZZ"),
        "time_element_parser": not_implemented("timeElementParser"),
        "time_no_ms": formatter("HH:mm:ssZZ"),
        "time_parser": not_implemented("timeParser"),
        "t_time": formatter("'T'HH:mm:ss.SSSZZ"),
        "t_time_no_ms": formatter("'T'HH:mm:ssZZ"),
        "week_date": formatter("xxxx-'W'ww-e"),
        "week_date_time": formatter("xxxx-'W'ww-e'T'HH:mm:ss.SSSZZ"),
        "week_date_time_no_ms": formatter("xxxx-'W'ww-e'T'HH:mm:ssZZ"),
        "weekyear": formatter("xxxx"),
        "weekyear_week": formatter("xxxx-'W'ww"),
        "weekyear_week_day": formatter("xxxx-'W'ww-e"),
        "year": formatter("yyyy"),
        "year_month": formatter("yyyy-MM"),
        "year_month_day": formatter("yyyy-MM-dd"),
        "rfc822": formatter("EEE, dd MMM yyyy HH:mm:ss Z"),
        "mysql": formatter("yyyy-MM-dd HH:mm:ss"),
    }
)

PARSERS: frozenset[str] = frozenset(
    name for name, fmt in FORMATTERS.items() if not fmt.is_implemented
)

PRINTERS: frozenset[str] = frozenset(FORMATTERS) - PARSERS


def get_formatter(name: str) -> Formatter:
    """Return the registry formatter called ``name``.

    Raises:
        KeyError: If there is no such formatter.
    """
    try:
        return FORMATTERS[name]
    except KeyError:
        raise KeyError(f"no formatter named {name!r}") from None


def show_formatters(instant: LocalDate | None = None, *, file: TextIO | None = None) -> None:
    """Print every printer with its rendering of ``instant``.

    One line per printer, sorted by name: the name padded to 40 columns,
    then the rendered text.

    Args:
        instant: The DateTime to render (default: now, UTC).
        file: Where to write (default: standard output).
    """
    from datefmt.core.datetime import DateTime
    from datefmt.format.unparse import unparse

    if instant is None:
        instant = DateTime.utc_now()
    out = file if file is not None else sys.stdout
    for name in sorted(PRINTERS):
        print(f"{name:<40}{unparse(FORMATTERS[name], instant)}", file=out)


__all__ = [
    "FORMATTERS",
    "PARSERS",
    "PRINTERS",
    "get_formatter",
    "show_formatters",
]
