"""Timezones and name tables.

This module provides:
    - Timezone: fixed UTC offset in minutes
    - NameTable: weekday and month names used by text tokens
"""

from __future__ import annotations

from datefmt.units.names import NameTable
from datefmt.units.timezone import Timezone

__all__: list[str] = [
    "NameTable",
    "Timezone",
]
