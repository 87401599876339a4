"""Period class representing a calendar-based amount of time.

A Period keeps its components as given (``Period(months=14)`` stays 14
months); only ``to_map`` folds weeks into days for the canonical field map.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Period:
    """A calendar period with date and clock components.

    All components may be positive, negative, or zero.

    Examples:
        >>> Period(years=1, weeks=2).to_map()["days"]
        14
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    millis: int = 0

    _type: ClassVar[str] = "Period"

    def to_map(self) -> dict[str, int]:
        """Return the canonical field map of this period."""
        return {
            "years": self.years,
            "months": self.months,
            "days": self.weeks * 7 + self.days,
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "millis": self.millis,
        }

    @property
    def is_zero(self) -> bool:
        return not any(self.to_map().values())


__all__ = ["Period"]
