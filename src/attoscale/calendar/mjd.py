from __future__ import annotations

from dataclasses import dataclass

from .date import Date

# MJD of 1970-01-01; MJD day 0 is 1858-11-17
MJD_UNIX_EPOCH = 40587


@dataclass(frozen=True, order=True)
class ModifiedJulianDate:
    """Day number in the Modified Julian Date count (JD - 2400000.5, whole days)."""
    day_number: int

    @classmethod
    def from_date(cls, date: Date) -> "ModifiedJulianDate":
        return cls(date.day_count + MJD_UNIX_EPOCH)

    def into_date(self) -> Date:
        return Date.from_day_count(self.day_number - MJD_UNIX_EPOCH)

    def __int__(self) -> int:
        return self.day_number

    def __str__(self) -> str:
        return f"MJD {self.day_number}"
