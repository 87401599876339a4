"""Internal utilities for datefmt.

This module contains private implementation details:
    - Calendar arithmetic on epoch days
    - Validation helpers
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datefmt._internal.validation import (
    validate_day,
    validate_day_of_year,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "validate_day",
    "validate_day_of_year",
    "validate_month",
    "validate_range",
    "validate_year",
]
