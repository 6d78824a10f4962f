"""Calculator configuration.

CalculatorConfig is passed explicitly to the Calculator and to the
worksheet evaluator; utcalc reads no environment variables or files.
"""

from __future__ import annotations

from dataclasses import dataclass

from utcalc.core.offset import UtcOffset
from utcalc.units.unit import Unit


@dataclass(frozen=True)
class CalculatorConfig:
    """Defaults applied when a call leaves a choice open.

    Attributes:
        default_offset: Offset used for input without one and for output
            when no target offset is given. None means UTC.
        ambiguous_numeric_hint: Unit for numeric input when no hint is
            given. None selects the unit by magnitude.

    Examples:
        >>> config = CalculatorConfig(default_offset=UtcOffset.from_hours(1))
        >>> str(config.default_offset)
        '+01:00'

        >>> CalculatorConfig().ambiguous_numeric_hint is None
        True
    """

    default_offset: UtcOffset | None = None
    ambiguous_numeric_hint: Unit | None = None

    def __post_init__(self) -> None:
        if self.default_offset is not None and not isinstance(self.default_offset, UtcOffset):
            raise TypeError(
                f"default_offset must be a UtcOffset, got {type(self.default_offset).__name__}"
            )
        if self.ambiguous_numeric_hint is not None and not isinstance(
            self.ambiguous_numeric_hint, Unit
        ):
            raise TypeError(
                "ambiguous_numeric_hint must be a Unit, "
                f"got {type(self.ambiguous_numeric_hint).__name__}"
            )

    @property
    def effective_offset(self) -> UtcOffset:
        """Return default_offset, or UTC when it is unset."""
        if self.default_offset is None:
            return UtcOffset.utc()
        return self.default_offset


__all__ = ["CalculatorConfig"]
