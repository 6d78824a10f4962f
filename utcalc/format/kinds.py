"""Output kinds accepted by the formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from utcalc.units.unit import Unit


class FormatKind(Enum):
    """Fixed output representations.

    Values:
        EPOCH_SECONDS: Seconds since the epoch, exact decimal.
        EPOCH_MILLIS: Milliseconds since the epoch, exact decimal.
        EPOCH_MICROS: Microseconds since the epoch, exact decimal.
        EPOCH_NANOS: Nanoseconds since the epoch (always an integer).
        ISO8601: Wall-clock date-time without an offset designator.
        ISO8601_WITH_OFFSET: Wall-clock date-time with Z or +HH:MM.
        RFC2822_LIKE: "Mon, 15 Jan 2024 14:30:45 +0000" (whole seconds).
    """

    EPOCH_SECONDS = "epoch_seconds"
    EPOCH_MILLIS = "epoch_millis"
    EPOCH_MICROS = "epoch_micros"
    EPOCH_NANOS = "epoch_nanos"
    ISO8601 = "iso8601"
    ISO8601_WITH_OFFSET = "iso8601_with_offset"
    RFC2822_LIKE = "rfc2822_like"

    @property
    def epoch_unit(self) -> Unit | None:
        """Return the Unit of an epoch kind, or None for calendar kinds."""
        return _EPOCH_UNITS.get(self)


@dataclass(frozen=True)
class CustomPattern:
    """A user-supplied pattern built from the closed token set.

    See utcalc.format.pattern for the tokens.

    Examples:
        >>> CustomPattern("%Y/%m/%d").pattern
        '%Y/%m/%d'
    """

    pattern: str


OutputKind = Union[FormatKind, CustomPattern]


_EPOCH_UNITS: dict[FormatKind, Unit] = {
    FormatKind.EPOCH_SECONDS: Unit.SECONDS,
    FormatKind.EPOCH_MILLIS: Unit.MILLISECONDS,
    FormatKind.EPOCH_MICROS: Unit.MICROSECONDS,
    FormatKind.EPOCH_NANOS: Unit.NANOSECONDS,
}


__all__ = ["FormatKind", "CustomPattern", "OutputKind"]
