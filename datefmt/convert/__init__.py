"""Conversion of temporal values.

Functions:
    instant_to_map: Convert an instant, Period, Interval or tagged map to
        the canonical field map.
"""

from __future__ import annotations

from datefmt.convert.mapping import instant_to_map

__all__: list[str] = [
    "instant_to_map",
]
