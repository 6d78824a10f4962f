"""Unit enumeration for epoch magnitudes.

This module provides the Unit enum naming the granularities a raw
epoch number can be expressed in, from seconds down to nanoseconds.
"""

from __future__ import annotations

from enum import Enum

from utcalc._internal.constants import (
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)


class Unit(Enum):
    """Granularity of a numeric epoch value.

    Each unit knows how many nanoseconds one step of it spans, which is
    all the parser and formatter need to move between numbers and
    Instants.

    Examples:
        >>> Unit.MILLISECONDS.nanos_per_unit
        1000000

        >>> Unit.from_name("us")
        <Unit.MICROSECONDS: 'microseconds'>
    """

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"

    @property
    def nanos_per_unit(self) -> int:
        """Return the number of nanoseconds in one unit."""
        return _NANOS_PER_UNIT[self]

    @property
    def fraction_digits(self) -> int:
        """Return how many decimal digits of a unit one nanosecond occupies."""
        return len(str(self.nanos_per_unit)) - 1

    @property
    def symbol(self) -> str:
        """Return the short symbol ("s", "ms", "us", "ns")."""
        return _SYMBOLS[self]

    @classmethod
    def from_name(cls, name: str) -> Unit:
        """Look up a unit by symbol or name, case-insensitively.

        Raises:
            ValueError: If the name is not a known unit.
        """
        key = name.strip().lower()
        try:
            return _ALIASES[key]
        except KeyError:
            raise ValueError(f"unknown unit: {name!r}") from None


_NANOS_PER_UNIT: dict[Unit, int] = {
    Unit.SECONDS: NANOS_PER_SECOND,
    Unit.MILLISECONDS: NANOS_PER_MILLISECOND,
    Unit.MICROSECONDS: NANOS_PER_MICROSECOND,
    Unit.NANOSECONDS: 1,
}

_SYMBOLS: dict[Unit, str] = {
    Unit.SECONDS: "s",
    Unit.MILLISECONDS: "ms",
    Unit.MICROSECONDS: "us",
    Unit.NANOSECONDS: "ns",
}

_ALIASES: dict[str, Unit] = {
    "s": Unit.SECONDS,
    "sec": Unit.SECONDS,
    "second": Unit.SECONDS,
    "seconds": Unit.SECONDS,
    "ms": Unit.MILLISECONDS,
    "millisecond": Unit.MILLISECONDS,
    "milliseconds": Unit.MILLISECONDS,
    "us": Unit.MICROSECONDS,
    "µs": Unit.MICROSECONDS,
    "microsecond": Unit.MICROSECONDS,
    "microseconds": Unit.MICROSECONDS,
    "ns": Unit.NANOSECONDS,
    "nanosecond": Unit.NANOSECONDS,
    "nanoseconds": Unit.NANOSECONDS,
}


__all__ = ["Unit"]
