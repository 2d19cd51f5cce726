"""
attoscale.core.units
--------------------
Fixed ratios between named units and the attosecond.

Months and years are the average Gregorian values (a 400-year cycle has
146097 days), not calendar months or years.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class UnitRatio:
    """Number of attoseconds in one `name`."""
    name: str
    attoseconds: int

    def __post_init__(self) -> None:
        if self.attoseconds <= 0:
            raise ValueError(f"unit ratio must be positive, got {self.attoseconds}")

    def __str__(self) -> str:
        return self.name


ATTO = UnitRatio("attosecond", 1)
FEMTO = UnitRatio("femtosecond", 10**3)
PICO = UnitRatio("picosecond", 10**6)
NANO = UnitRatio("nanosecond", 10**9)
MICRO = UnitRatio("microsecond", 10**12)
MILLI = UnitRatio("millisecond", 10**15)
SECOND = UnitRatio("second", 10**18)
MINUTE = UnitRatio("minute", 60 * SECOND.attoseconds)
HOUR = UnitRatio("hour", 3600 * SECOND.attoseconds)
DAY = UnitRatio("day", 86400 * SECOND.attoseconds)
WEEK = UnitRatio("week", 7 * DAY.attoseconds)
MONTH = UnitRatio("month", 2_629_746 * SECOND.attoseconds)
YEAR = UnitRatio("year", 31_556_952 * SECOND.attoseconds)

ALL_UNITS: Dict[str, UnitRatio] = {
    u.name: u
    for u in (ATTO, FEMTO, PICO, NANO, MICRO, MILLI, SECOND, MINUTE, HOUR, DAY, WEEK, MONTH, YEAR)
}

# short symbols accepted by the CLI
_SYMBOLS: Dict[str, UnitRatio] = {
    "as": ATTO, "fs": FEMTO, "ps": PICO, "ns": NANO, "us": MICRO, "ms": MILLI,
    "s": SECOND, "min": MINUTE, "h": HOUR, "d": DAY, "w": WEEK, "mo": MONTH, "y": YEAR,
}


def list_units() -> List[str]:
    return list(ALL_UNITS)


def unit_from_name(name: str) -> UnitRatio:
    key = name.strip().lower()
    if key in _SYMBOLS:
        return _SYMBOLS[key]
    if key in ALL_UNITS:
        return ALL_UNITS[key]
    if key.endswith("s") and key[:-1] in ALL_UNITS:
        return ALL_UNITS[key[:-1]]
    raise KeyError(f"Unknown unit '{name}'. Available: {list_units() + sorted(_SYMBOLS)}")
