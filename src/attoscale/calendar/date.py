"""
attoscale.calendar.date
-----------------------
Calendar-neutral dates: a day count from 1970-01-01 (day 0).

Date is a point, DayCount is a distance between two points:
  Date + DayCount -> Date
  Date - DayCount -> Date
  Date.elapsed_days_since(Date) -> DayCount
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from ..core.days import DayCount
from ..core.errors import InvalidMonthNumber


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def from_number(cls, number: int) -> "Month":
        try:
            return cls(number)
        except ValueError:
            raise InvalidMonthNumber(number) from None


class WeekDay(IntEnum):
    """ISO numbering, Monday is 1."""
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7


@dataclass(frozen=True, order=True)
class Date:
    time_since_epoch: DayCount

    @classmethod
    def from_day_count(cls, days: int) -> "Date":
        return cls(DayCount(days))

    @property
    def day_count(self) -> int:
        return self.time_since_epoch.count

    def elapsed_days_since(self, other: "Date") -> DayCount:
        return self.time_since_epoch - other.time_since_epoch

    def week_day(self) -> WeekDay:
        # 1970-01-01 was a Thursday
        return WeekDay((self.day_count + 3) % 7 + 1)

    def __add__(self, other: Any) -> "Date":
        if not isinstance(other, DayCount):
            return NotImplemented
        return Date(self.time_since_epoch + other)

    def __sub__(self, other: Any) -> "Date":
        if not isinstance(other, DayCount):
            return NotImplemented
        return Date(self.time_since_epoch - other)

    def __str__(self) -> str:
        from .civil import HistoricDate
        return str(HistoricDate.from_date(self))
