"""
attoscale.scales.descriptors
----------------------------
One immutable descriptor per time scale.

tai_offset is the constant difference from TAI for scales ticking at the TAI
rate; it is None for the relativistic scales (TCG, TCB, TDB), whose
relation to the others needs a rate correction.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Optional

from ..calendar.civil import HistoricDate
from ..calendar.date import Date, Month
from ..core.duration import Duration


def _epoch(year: int, month: int, day: int) -> Date:
    return HistoricDate(year, Month(month), day).into_date()


@dataclass(frozen=True)
class TimeScale:
    abbreviation: str
    name: str
    epoch: Date
    tai_offset: Optional[Duration] = None
    uniform: bool = True

    @property
    def is_terrestrial(self) -> bool:
        return self.tai_offset is not None

    def tweak(self, **kwargs: Any) -> "TimeScale":
        """Derived descriptor, e.g. TT.tweak(abbreviation="TT(BIPM)")."""
        return replace(self, **kwargs)

    def info(self) -> Dict[str, object]:
        return {
            "abbreviation": self.abbreviation,
            "name": self.name,
            "epoch": str(self.epoch),
            "tai_offset": None if self.tai_offset is None else str(self.tai_offset),
            "uniform": self.uniform,
        }

    def __str__(self) -> str:
        return self.abbreviation


TAI = TimeScale("TAI", "International Atomic Time", _epoch(1958, 1, 1), Duration.zero())
UTC = TimeScale("UTC", "Coordinated Universal Time", _epoch(1972, 1, 1), Duration.zero(), uniform=False)
TT = TimeScale("TT", "Terrestrial Time", _epoch(1977, 1, 1), Duration.milliseconds(32_184))
TCG = TimeScale("TCG", "Geocentric Coordinate Time", _epoch(1977, 1, 1))
TCB = TimeScale("TCB", "Barycentric Coordinate Time", _epoch(1977, 1, 1))
TDB = TimeScale("TDB", "Barycentric Dynamical Time", _epoch(1977, 1, 1))
GPST = TimeScale("GPST", "Global Positioning System Time", _epoch(1980, 1, 6), Duration.seconds(-19))
QZSST = TimeScale("QZSST", "Quasi-Zenith Satellite System Time", _epoch(1999, 8, 22), Duration.seconds(-19))
BDT = TimeScale("BDT", "BeiDou Time", _epoch(2006, 1, 1), Duration.seconds(-33))
GLONASST = TimeScale("GLONASST", "Glonass Time", _epoch(1996, 1, 1), Duration.hours(3), uniform=False)

ALL_SCALES: Dict[str, TimeScale] = {
    s.abbreviation: s for s in (TAI, UTC, TT, TCG, TCB, TDB, GPST, QZSST, BDT, GLONASST)
}


@dataclass
class ScaleRegistry:
    _scales: Dict[str, TimeScale]

    def get(self, abbreviation: str) -> TimeScale:
        if abbreviation not in self._scales:
            raise KeyError(f"Unknown time scale '{abbreviation}'. Available: {sorted(self._scales)}")
        return self._scales[abbreviation]

    def list(self) -> List[str]:
        return sorted(self._scales.keys())

    def register(self, scale: TimeScale, *, overwrite: bool = False) -> None:
        if (not overwrite) and (scale.abbreviation in self._scales):
            raise KeyError(f"Time scale '{scale.abbreviation}' already exists. Use overwrite=True to replace.")
        self._scales[scale.abbreviation] = scale


SCALES = ScaleRegistry(dict(ALL_SCALES))
