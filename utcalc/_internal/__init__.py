"""Internal utilities for utcalc.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from utcalc._internal.calendar import (
    days_in_month,
    epoch_days_to_ymd,
    is_leap_year,
    ymd_to_epoch_days,
)

__all__: list[str] = [
    "days_in_month",
    "epoch_days_to_ymd",
    "is_leap_year",
    "ymd_to_epoch_days",
]
