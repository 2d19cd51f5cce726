"""
attoscale.calendar.civil
------------------------
Historic, proleptic Gregorian and proleptic Julian calendar dates.

Years use astronomical numbering (year 0 is 1 BC). Conversions go through
the Julian Day Number with the Fliegel-Van Flandern integer formulas; all
divisions floor, so they hold for negative years too.

The historic calendar is the Julian calendar up to 1582-10-04 and the
Gregorian calendar from 1582-10-15 on; the ten days in between never
happened and are rejected.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Tuple, Type

from ..core.days import DayCount
from ..core.errors import (
    InvalidCalendarDate,
    InvalidDayOfYear,
    InvalidGregorianDate,
    InvalidHistoricDate,
    InvalidJulianDate,
)
from .date import Date, Month

# JDN of 1970-01-01 (day 0 of Date)
JDN_UNIX_EPOCH = 2440588

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_GREGORIAN_REFORM = (1582, 10, 15)
_LAST_JULIAN_DAY = (1582, 10, 4)


# ============================================================
# Julian Day Number kernels
# ============================================================

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> Tuple[int, int, int]:
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_to_jdn(year: int, month: int, day: int) -> int:
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - 32083


def jdn_to_julian(jdn: int) -> Tuple[int, int, int]:
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + (m // 10)
    return year, month, day


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_julian_leap_year(year: int) -> bool:
    return year % 4 == 0


# Date of the first Gregorian day, 1582-10-15
REFORM_DATE = Date.from_day_count(gregorian_to_jdn(*_GREGORIAN_REFORM) - JDN_UNIX_EPOCH)


# ============================================================
# Calendar date types
# ============================================================

@dataclass(frozen=True)
class CalendarDate:
    """(year, month, day) in one calendar; validated on construction."""
    year: int
    month: Month
    day: int

    error: ClassVar[Type[InvalidCalendarDate]] = InvalidCalendarDate

    def __post_init__(self) -> None:
        if type(self) is CalendarDate:
            raise TypeError("CalendarDate has no calendar rules; use HistoricDate, GregorianDate or JulianDate")
        if not 1 <= int(self.month) <= 12:
            raise self.error(self.year, self.month, self.day)
        object.__setattr__(self, "month", Month(int(self.month)))
        if not self._exists(self.year, self.month, self.day):
            raise self.error(self.year, self.month, self.day)

    # -- calendar rules, overridden per calendar -------------------
    @classmethod
    def is_leap_year_number(cls, year: int) -> bool:
        raise NotImplementedError

    @classmethod
    def _to_jdn(cls, year: int, month: int, day: int) -> int:
        raise NotImplementedError

    @classmethod
    def _from_jdn(cls, jdn: int) -> Tuple[int, int, int]:
        raise NotImplementedError

    @classmethod
    def days_in_month(cls, year: int, month: int) -> int:
        if month == 2 and cls.is_leap_year_number(year):
            return 29
        return _DAYS_IN_MONTH[month - 1]

    @classmethod
    def _exists(cls, year: int, month: int, day: int) -> bool:
        return 1 <= day <= cls.days_in_month(year, month)

    # -- conversions -------------------------------------------------
    @classmethod
    def from_date(cls, date: Date) -> "CalendarDate":
        year, month, day = cls._from_jdn(date.day_count + JDN_UNIX_EPOCH)
        return cls(year, Month(month), day)

    def into_date(self) -> Date:
        return Date.from_day_count(self._to_jdn(self.year, int(self.month), self.day) - JDN_UNIX_EPOCH)

    @classmethod
    def from_day_of_year(cls, year: int, day_of_year: int) -> "CalendarDate":
        first = cls(year, Month.JANUARY, 1).into_date()
        last = cls(year, Month.DECEMBER, 31).into_date()
        date = first + DayCount(day_of_year - 1)
        if day_of_year < 1 or date > last:
            raise InvalidDayOfYear(year, day_of_year)
        return cls.from_date(date)

    def day_of_year(self) -> int:
        first = type(self)(self.year, Month.JANUARY, 1).into_date()
        return self.into_date().elapsed_days_since(first).count + 1

    def is_leap_year(self) -> bool:
        return self.is_leap_year_number(self.year)

    def __str__(self) -> str:
        return f"{self.year:04}-{int(self.month):02}-{self.day:02}"


class GregorianDate(CalendarDate):
    error = InvalidGregorianDate

    @classmethod
    def is_leap_year_number(cls, year: int) -> bool:
        return is_gregorian_leap_year(year)

    @classmethod
    def _to_jdn(cls, year: int, month: int, day: int) -> int:
        return gregorian_to_jdn(year, month, day)

    @classmethod
    def _from_jdn(cls, jdn: int) -> Tuple[int, int, int]:
        return jdn_to_gregorian(jdn)


class JulianDate(CalendarDate):
    error = InvalidJulianDate

    @classmethod
    def is_leap_year_number(cls, year: int) -> bool:
        return is_julian_leap_year(year)

    @classmethod
    def _to_jdn(cls, year: int, month: int, day: int) -> int:
        return julian_to_jdn(year, month, day)

    @classmethod
    def _from_jdn(cls, jdn: int) -> Tuple[int, int, int]:
        return jdn_to_julian(jdn)


class HistoricDate(CalendarDate):
    error = InvalidHistoricDate

    @classmethod
    def is_leap_year_number(cls, year: int) -> bool:
        if year < _GREGORIAN_REFORM[0]:
            return is_julian_leap_year(year)
        return is_gregorian_leap_year(year)

    @classmethod
    def _exists(cls, year: int, month: int, day: int) -> bool:
        ymd = (year, int(month), day)
        if _LAST_JULIAN_DAY < ymd < _GREGORIAN_REFORM:
            return False
        if ymd <= _LAST_JULIAN_DAY:
            return 1 <= day <= JulianDate.days_in_month(year, month)
        return 1 <= day <= GregorianDate.days_in_month(year, month)

    @classmethod
    def _to_jdn(cls, year: int, month: int, day: int) -> int:
        if (year, month, day) < _GREGORIAN_REFORM:
            return julian_to_jdn(year, month, day)
        return gregorian_to_jdn(year, month, day)

    @classmethod
    def _from_jdn(cls, jdn: int) -> Tuple[int, int, int]:
        if jdn < REFORM_DATE.day_count + JDN_UNIX_EPOCH:
            return jdn_to_julian(jdn)
        return jdn_to_gregorian(jdn)
