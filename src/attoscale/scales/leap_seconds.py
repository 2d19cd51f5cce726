from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Protocol, Tuple

from ..calendar.date import Date
from ..core.units import DAY, SECOND
from .descriptors import UTC

if TYPE_CHECKING:
    from .time_point import UtcTime

logger = logging.getLogger(__name__)


class LeapSecondProvider(Protocol):
    """Leap second bookkeeping for UTC-based civil time."""

    def leap_seconds_on_date(self, date: Date) -> Tuple[bool, int]:
        """(date ends with a leap second, leap seconds inserted before the date)."""
        ...

    def leap_seconds_at_instant(self, utc: "UtcTime") -> Tuple[bool, int]:
        """(instant lies inside a leap second, leap seconds applicable at the instant)."""
        ...

    def info(self) -> Dict[str, object]: ...


# (day ending with a leap second, leap seconds before that day), days since 1970-01-01.
# The first row is the 1971-12-31 step that brings TAI - UTC from 9 s to the
# 10 s in force at the UTC epoch; earlier instants use the first count.
LEAP_SECOND_DAYS: Tuple[Tuple[int, int], ...] = (
    (729, 9),     # 1971-12-31
    (911, 10),    # 1972-06-30
    (1095, 11),   # 1972-12-31
    (1460, 12),   # 1973-12-31
    (1825, 13),   # 1974-12-31
    (2190, 14),   # 1975-12-31
    (2556, 15),   # 1976-12-31
    (2921, 16),   # 1977-12-31
    (3286, 17),   # 1978-12-31
    (3651, 18),   # 1979-12-31
    (4198, 19),   # 1981-06-30
    (4563, 20),   # 1982-06-30
    (4928, 21),   # 1983-06-30
    (5659, 22),   # 1985-06-30
    (6573, 23),   # 1987-12-31
    (7304, 24),   # 1989-12-31
    (7669, 25),   # 1990-12-31
    (8216, 26),   # 1992-06-30
    (8581, 27),   # 1993-06-30
    (8946, 28),   # 1994-06-30
    (9495, 29),   # 1995-12-31
    (10042, 30),  # 1997-06-30
    (10591, 31),  # 1998-12-31
    (13148, 32),  # 2005-12-31
    (14244, 33),  # 2008-12-31
    (15521, 34),  # 2012-06-30
    (16616, 35),  # 2015-06-30
    (17166, 36),  # 2016-12-31
)

_SECONDS_PER_DAY = DAY.attoseconds // SECOND.attoseconds

Range = Tuple[int, bool, int]  # (first key, is leap second, cumulative count)


@dataclass(frozen=True)
class StaticLeapSecondProvider:
    """
    Provider backed by a fixed table of leap days.

    The table is expanded once into reverse-chronological ranges keyed by day
    number and by whole UTC seconds since the UTC epoch. Each range runs from
    its first key up to the first key of the range listed before it, so a
    lookup returns the first range whose first key is not after the query;
    recent dates are matched first.
    """
    leap_days: Tuple[Tuple[int, int], ...] = LEAP_SECOND_DAYS
    utc_epoch: Date = UTC.epoch
    _day_ranges: Tuple[Range, ...] = field(init=False, repr=False, compare=False)
    _second_ranges: Tuple[Range, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        days = [d for d, _ in self.leap_days]
        if days != sorted(set(days)):
            raise ValueError("leap second days must be strictly increasing")

        day_ranges = []
        second_ranges = []
        for day, before in self.leap_days:
            day_ranges.append((day, True, before))
            day_ranges.append((day + 1, False, before + 1))
            # 23:59:60 of `day`, counted in UTC seconds
            leap = (day + 1 - self.utc_epoch.day_count) * _SECONDS_PER_DAY + before
            second_ranges.append((leap, True, before))
            second_ranges.append((leap + 1, False, before + 1))
        object.__setattr__(self, "_day_ranges", tuple(reversed(day_ranges)))
        object.__setattr__(self, "_second_ranges", tuple(reversed(second_ranges)))

        if self.leap_days != LEAP_SECOND_DAYS:
            logger.debug("custom leap second table with %d entries", len(self.leap_days))

    @property
    def initial_count(self) -> int:
        return self.leap_days[0][1] if self.leap_days else 0

    @staticmethod
    def _lookup(ranges: Tuple[Range, ...], key: int, default: int) -> Tuple[bool, int]:
        for start, is_leap, count in ranges:
            if key >= start:
                return is_leap, count
        return False, default

    def leap_seconds_on_date(self, date: Date) -> Tuple[bool, int]:
        return self._lookup(self._day_ranges, date.day_count, self.initial_count)

    def leap_seconds_at_instant(self, utc: "UtcTime") -> Tuple[bool, int]:
        seconds, _ = utc.time_since_epoch.factor_out(SECOND, floor=True)
        return self._lookup(self._second_ranges, seconds, self.initial_count)

    def info(self) -> Dict[str, object]:
        return {
            "type": "static_table",
            "n": len(self.leap_days),
            "first": self.leap_days[0][0] if self.leap_days else None,
            "last": self.leap_days[-1][0] if self.leap_days else None,
            "current": self.leap_days[-1][1] + 1 if self.leap_days else 0,
        }


STATIC_LEAP_SECONDS = StaticLeapSecondProvider()
