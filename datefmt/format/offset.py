"""Timezone offset normalizer.

Parsed wall-clock fields are read as if they were UTC; the offset text
that accompanied them is then used to shift the instant to the real UTC
moment. A "+02:00" suffix means the text was two hours ahead of UTC, so
two hours are subtracted; a "-05:00" suffix adds five hours.
"""

from __future__ import annotations

import re
from typing import TypeVar

from datefmt.core.date import LocalDate
from datefmt.core.datetime import LocalDateTime

_OFFSET_SUFFIX_RE = re.compile(r"Z|(?:([-+])(\d{2})(?::?(\d{2}))?)$")

T = TypeVar("T", bound=LocalDate)


def timezone_adjustment(instant: T, offset_text: str) -> T:
    """Shift an instant by the offset written at the end of ``offset_text``.

    Only a complete signed offset (sign, hours and minutes, with or
    without a colon) shifts the instant. "Z", an hours-only offset such as
    "+05", or text without an offset leaves it unchanged; this function
    never raises. Date-only values have no clock and are returned as is.

    The result is a new instant; applying the same non-"Z" offset twice
    shifts twice.

    Examples:
        >>> from datefmt.core import DateTime
        >>> dt = DateTime(2010, 10, 3, 12, 0)
        >>> timezone_adjustment(dt, "+02:00").hour
        10
        >>> timezone_adjustment(dt, "-0130").minute
        30
        >>> timezone_adjustment(dt, "Z") is dt
        True
    """
    match = _OFFSET_SUFFIX_RE.search(offset_text)
    if match is None:
        return instant

    sign, hours, minutes = match.groups()
    if sign is None or hours is None or minutes is None:
        return instant
    if not isinstance(instant, LocalDateTime):
        return instant

    delta = int(hours) * 60 + int(minutes)
    return instant.plus_minutes(delta if sign == "-" else -delta)  # type: ignore[return-value]


__all__ = ["timezone_adjustment"]
