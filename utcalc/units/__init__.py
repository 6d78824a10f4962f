"""Units used by utcalc.

Units:
    Unit: Granularity of a numeric epoch value (s, ms, us, ns).
"""

from __future__ import annotations

from utcalc.units.unit import Unit

__all__: list[str] = [
    "Unit",
]
