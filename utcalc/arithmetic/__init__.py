"""Arithmetic on Instants.

Functions:
    add: Add a Duration or Period to an Instant.
    subtract: Subtract a Duration or Period from an Instant.
    diff: Exact signed Duration between two Instants.
    calendar_diff: Anchored calendar decomposition of a difference.
    shift_months: Move an Instant by whole months with day clamping.

Examples:
    >>> from utcalc.arithmetic import add, diff
    >>> from utcalc.core import Instant, Period
    >>> from utcalc.parse import parse
    >>> add(parse("2023-01-31T00:00:00Z"), Period(months=1)) == parse("2023-02-28T00:00:00Z")
    True
"""

from __future__ import annotations

from utcalc.arithmetic.ops import Amount, add, calendar_diff, diff, subtract
from utcalc.arithmetic.period_ops import add_period_to_instant, shift_months

__all__ = [
    "Amount",
    "add",
    "subtract",
    "diff",
    "calendar_diff",
    "shift_months",
    "add_period_to_instant",
]
