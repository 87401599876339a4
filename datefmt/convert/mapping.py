"""Conversion of instants, periods and intervals to a field map.

The canonical field map has the keys years, months, days, hours, minutes,
seconds and millis. Values are dispatched on their ``_type`` tag: the
class attribute for datefmt objects, the ``"_type"`` key for mappings.

Examples:
    >>> from datefmt.core import LocalDate
    >>> instant_to_map(LocalDate(2010, 10, 3))["days"]
    3
    >>> instant_to_map({"_type": "Period", "months": 2})
    {'_type': 'Period', 'months': 2}
"""

from __future__ import annotations

from typing import Any, Mapping, Union

from datefmt.core.date import LocalDate
from datefmt.core.interval import Interval
from datefmt.core.period import Period
from datefmt.errors import UnsupportedTypeError

Mappable = Union[LocalDate, Period, Interval, Mapping[str, Any]]

_INSTANT_TYPES = frozenset({"DateTime", "LocalDateTime", "LocalDate"})


def _type_tag(value: object) -> str | None:
    if isinstance(value, Mapping):
        tag = value.get("_type")
    else:
        tag = getattr(type(value), "_type", None)
    return tag if isinstance(tag, str) else None


def _fields_of(instant: LocalDate) -> dict[str, int]:
    return {
        "years": instant.year,
        "months": instant.month,
        "days": instant.day,
        "hours": instant.hour,
        "minutes": instant.minute,
        "seconds": instant.second,
        "millis": instant.millisecond,
    }


def instant_to_map(value: Mappable) -> Mapping[str, Any]:
    """Convert a value to its canonical field map.

    Args:
        value: An instant (its own fields), a Period, an Interval (its
            calendar difference), or a mapping tagged "_type": "Period"
            (returned as is) or "_type": "Interval" (with "start" and
            "end" instants).

    Raises:
        UnsupportedTypeError: For any other value.
    """
    tag = _type_tag(value)

    if isinstance(value, Mapping):
        if tag == "Period":
            return value
        if tag == "Interval":
            try:
                interval = Interval(value["start"], value["end"])
            except KeyError as e:
                raise UnsupportedTypeError(f"interval map is missing {e.args[0]!r}") from e
            return interval.to_period().to_map()
        raise UnsupportedTypeError(f"cannot convert a map tagged {tag!r}")

    if tag in _INSTANT_TYPES:
        return _fields_of(value)  # type: ignore[arg-type]
    if tag == "Period":
        return value.to_map()  # type: ignore[union-attr]
    if tag == "Interval":
        return value.to_period().to_map()  # type: ignore[union-attr]
    raise UnsupportedTypeError(f"cannot convert {type(value).__name__} to a field map")


__all__ = ["Mappable", "instant_to_map"]
