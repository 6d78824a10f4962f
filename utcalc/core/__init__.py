"""Core value types for utcalc.

Types:
    Instant: Absolute point in time, nanoseconds since the Unix epoch.
    UtcOffset: Fixed shift from UTC.
    CalendarDateTime: Wall-clock view of an Instant at an offset.
    Duration: Exact scalar span of time.
    Period: Calendar amount (years, months, weeks, days) plus exact remainder.
"""

from __future__ import annotations

from utcalc.core.civil import CalendarDateTime
from utcalc.core.duration import Duration
from utcalc.core.instant import Instant
from utcalc.core.offset import UtcOffset
from utcalc.core.period import Period

__all__: list[str] = [
    "CalendarDateTime",
    "Duration",
    "Instant",
    "Period",
    "UtcOffset",
]
