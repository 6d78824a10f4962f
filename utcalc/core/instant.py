"""Instant class representing an absolute point in time.

This module provides the Instant class: a signed count of nanoseconds
since the Unix epoch, 1970-01-01T00:00:00Z.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from utcalc._internal.constants import NANOS_PER_SECOND

if TYPE_CHECKING:
    from utcalc.units.unit import Unit


class Instant:
    """An absolute, zone-independent point in time.

    Instant stores a single integer: nanoseconds elapsed since the Unix
    epoch (negative before it). It carries no timezone; wall-clock views
    are derived on demand through CalendarDateTime.

    Instants are immutable, hashable and totally ordered.

    Examples:
        >>> Instant.epoch().nanos
        0

        >>> Instant.from_seconds(1).nanos
        1000000000

        >>> Instant.from_millis(-1500).seconds
        -2
        >>> Instant.from_millis(-1500).subsec_nanos
        500000000
    """

    __slots__ = ("_nanos",)

    def __init__(self, nanos: int) -> None:
        if isinstance(nanos, bool) or not isinstance(nanos, int):
            raise TypeError(f"nanos must be an integer, got {type(nanos).__name__}")
        self._nanos = nanos

    @classmethod
    def epoch(cls) -> Instant:
        """Return 1970-01-01T00:00:00Z."""
        return cls(0)

    @classmethod
    def from_seconds(cls, seconds: int) -> Instant:
        return cls(seconds * NANOS_PER_SECOND)

    @classmethod
    def from_millis(cls, millis: int) -> Instant:
        return cls(millis * 1_000_000)

    @classmethod
    def from_micros(cls, micros: int) -> Instant:
        return cls(micros * 1_000)

    @classmethod
    def from_nanos(cls, nanos: int) -> Instant:
        return cls(nanos)

    @classmethod
    def from_unit(cls, value: int, unit: Unit) -> Instant:
        """Create an Instant from a whole number of ``unit`` since the epoch."""
        return cls(value * unit.nanos_per_unit)

    @property
    def nanos(self) -> int:
        """Return nanoseconds since the epoch."""
        return self._nanos

    @property
    def seconds(self) -> int:
        """Return whole seconds since the epoch, floored."""
        return self._nanos // NANOS_PER_SECOND

    @property
    def subsec_nanos(self) -> int:
        """Return the nanoseconds past ``seconds``, always in [0, 1e9)."""
        return self._nanos % NANOS_PER_SECOND

    def to_unit(self, unit: Unit) -> tuple[int, int]:
        """Split this instant into whole units and a nanosecond remainder.

        The whole part is floored, so the remainder is always
        non-negative and smaller than one unit.

        Examples:
            >>> from utcalc.units.unit import Unit
            >>> Instant(1_500_000_000).to_unit(Unit.SECONDS)
            (1, 500000000)
        """
        return divmod(self._nanos, unit.nanos_per_unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos == other._nanos

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos < other._nanos

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos <= other._nanos

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos > other._nanos

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return self._nanos >= other._nanos

    def __hash__(self) -> int:
        return hash(("Instant", self._nanos))

    def __repr__(self) -> str:
        return f"Instant({self._nanos})"

    def __setattr__(self, name: str, value: object) -> None:
        if hasattr(self, "_nanos"):
            raise AttributeError("Instant is immutable")
        object.__setattr__(self, name, value)


__all__ = ["Instant"]
