"""Core temporal types.

This module provides the instant shapes the formatters read and build,
and the Period and Interval values the field mapper accepts:
    - LocalDate: Calendar date without a clock
    - LocalDateTime: Date and wall-clock time without an offset
    - DateTime: Date and time at a fixed UTC offset
    - Period: Calendar period (years through milliseconds)
    - Interval: Span between two instants [start, end)
"""

from __future__ import annotations

from datefmt.core.date import LocalDate
from datefmt.core.datetime import DateTime, LocalDateTime
from datefmt.core.interval import Interval
from datefmt.core.period import Period

__all__: list[str] = [
    "DateTime",
    "Interval",
    "LocalDate",
    "LocalDateTime",
    "Period",
]
