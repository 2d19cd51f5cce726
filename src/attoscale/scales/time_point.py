"""
attoscale.scales.time_point
---------------------------
Instants tagged by their time scale.

Every scale has its own class (TaiTime, UtcTime, ...). An instant stores only
its time since the scale epoch; the class is the tag. Equality and ordering
are defined between instances of the same class only, so instants of two
scales never mix without an explicit `into(...)`.

Uniform scales map civil date-times to instants arithmetically. UTC and
GLONASST consult a leap second provider, passed as `leap_seconds=` and
defaulting to the static table.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Type, TypeVar

from ..calendar.civil import CalendarDate, GregorianDate, HistoricDate, JulianDate
from ..calendar.date import Date
from ..calendar.mjd import ModifiedJulianDate
from ..core.days import DayCount
from ..core.digits import format_digits, fractional_digits
from ..core.duration import Duration, parse_precision
from ..core.errors import (
    InvalidCalendarDate,
    InvalidDateTime,
    InvalidGregorianDateTime,
    InvalidHistoricDateTime,
    InvalidJulianDateTime,
    InvalidTimeOfDay,
    NonLeapSecondDateTime,
    NotUniformScale,
)
from ..core.units import DAY, HOUR, MINUTE, SECOND, UnitRatio
from . import relativistic
from .convert import convert_time_since_epoch
from .descriptors import BDT, GLONASST, GPST, QZSST, SCALES, TAI, TCB, TCG, TDB, TT, UTC, TimeScale
from .leap_seconds import STATIC_LEAP_SECONDS, LeapSecondProvider

T = TypeVar("T", bound="TimePoint")
U = TypeVar("U", bound="TimePoint")

DateTime = Tuple[Date, int, int, int]
FineDateTime = Tuple[Date, int, int, int, Duration]

_CLASSES: Dict[str, Type["TimePoint"]] = {}


def time_point_class(abbreviation: str) -> Type["TimePoint"]:
    if abbreviation not in _CLASSES:
        raise KeyError(f"Unknown time scale '{abbreviation}'. Available: {sorted(_CLASSES)}")
    return _CLASSES[abbreviation]


def _time_of_day(hour: int, minute: int, second: int) -> Duration:
    return Duration.hours(hour) + Duration.minutes(minute) + Duration.seconds(second)


def _decompose(tse: Duration, epoch: Date) -> DateTime:
    days, rest = tse.factor_out(DAY, floor=True)
    hours, rest = rest.factor_out(HOUR)
    minutes, rest = rest.factor_out(MINUTE)
    seconds, _ = rest.factor_out(SECOND, floor=True)
    return epoch + DayCount(days), hours, minutes, seconds


@dataclass(frozen=True, order=True)
class TimePoint:
    time_since_epoch: Duration

    scale: ClassVar[TimeScale]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        scale = cls.__dict__.get("scale")
        if scale is not None:
            _CLASSES.setdefault(scale.abbreviation, cls)
            if scale.abbreviation not in SCALES.list():
                SCALES.register(scale)

    def __post_init__(self) -> None:
        if not hasattr(type(self), "scale"):
            raise TypeError(f"{type(self).__name__} has no time scale; use a concrete class such as TaiTime")
        if not isinstance(self.time_since_epoch, Duration):
            raise TypeError(f"time_since_epoch must be a Duration, got {type(self.time_since_epoch).__name__}")

    # ------------------------------------------------------------
    # Raw construction and arithmetic
    # ------------------------------------------------------------
    @classmethod
    def from_time_since_epoch(cls: Type[T], time_since_epoch: Duration) -> T:
        return cls(time_since_epoch)

    def __add__(self: T, other: Any) -> T:
        if not isinstance(other, Duration):
            return NotImplemented
        return type(self)(self.time_since_epoch + other)

    __radd__ = __add__

    def __sub__(self, other: Any) -> Any:
        if isinstance(other, Duration):
            return type(self)(self.time_since_epoch - other)
        if isinstance(other, TimePoint):
            if type(other) is not type(self):
                raise TypeError(
                    f"cannot subtract {other.scale.abbreviation} from {self.scale.abbreviation}; convert first"
                )
            return self.time_since_epoch - other.time_since_epoch
        return NotImplemented

    def round(self: T, unit: UnitRatio) -> T:
        return type(self)(self.time_since_epoch.round(unit))

    def ceil(self: T, unit: UnitRatio) -> T:
        return type(self)(self.time_since_epoch.ceil(unit))

    def floor(self: T, unit: UnitRatio) -> T:
        return type(self)(self.time_since_epoch.floor(unit))

    def truncate(self: T, unit: UnitRatio) -> T:
        return type(self)(self.time_since_epoch.truncate(unit))

    # ------------------------------------------------------------
    # Civil date-times (uniform scales)
    # ------------------------------------------------------------
    @classmethod
    def from_datetime(cls: Type[T], date: Date, hour: int, minute: int, second: int) -> T:
        if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
            raise InvalidTimeOfDay(hour, minute, second)
        days = date.elapsed_days_since(cls.scale.epoch).into_duration()
        return cls(_time_of_day(hour, minute, second) + days)

    def into_datetime(self) -> DateTime:
        return _decompose(self.time_since_epoch, self.scale.epoch)

    @classmethod
    def from_fine_datetime(
        cls: Type[T], date: Date, hour: int, minute: int, second: int, subsecond: Duration, **kwargs: Any
    ) -> T:
        return cls.from_datetime(date, hour, minute, second, **kwargs) + subsecond

    def into_fine_datetime(self, **kwargs: Any) -> FineDateTime:
        whole = self.time_since_epoch.floor(SECOND)
        date, hour, minute, second = type(self)(whole).into_datetime(**kwargs)
        return date, hour, minute, second, self.time_since_epoch - whole

    # ------------------------------------------------------------
    # Calendar constructors
    # ------------------------------------------------------------
    @classmethod
    def _from_calendar(
        cls: Type[T],
        calendar: Type[CalendarDate],
        wrapper: Type[InvalidDateTime],
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        subsecond: Optional[Duration],
        kwargs: Dict[str, Any],
    ) -> T:
        try:
            date = calendar(year, month, day).into_date()
            if subsecond is None:
                return cls.from_datetime(date, hour, minute, second, **kwargs)
            return cls.from_fine_datetime(date, hour, minute, second, subsecond, **kwargs)
        except (InvalidCalendarDate, InvalidTimeOfDay, NonLeapSecondDateTime) as err:
            raise wrapper(err) from err

    @classmethod
    def from_historic_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            HistoricDate, InvalidHistoricDateTime, year, month, day, hour, minute, second, None, kwargs
        )

    @classmethod
    def from_gregorian_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            GregorianDate, InvalidGregorianDateTime, year, month, day, hour, minute, second, None, kwargs
        )

    @classmethod
    def from_julian_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            JulianDate, InvalidJulianDateTime, year, month, day, hour, minute, second, None, kwargs
        )

    @classmethod
    def from_fine_historic_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int, minute: int, second: int,
        subsecond: Duration, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            HistoricDate, InvalidHistoricDateTime, year, month, day, hour, minute, second, subsecond, kwargs
        )

    @classmethod
    def from_fine_gregorian_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int, minute: int, second: int,
        subsecond: Duration, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            GregorianDate, InvalidGregorianDateTime, year, month, day, hour, minute, second, subsecond, kwargs
        )

    @classmethod
    def from_fine_julian_datetime(
        cls: Type[T], year: int, month: int, day: int, hour: int, minute: int, second: int,
        subsecond: Duration, **kwargs: Any
    ) -> T:
        return cls._from_calendar(
            JulianDate, InvalidJulianDateTime, year, month, day, hour, minute, second, subsecond, kwargs
        )

    def into_historic_datetime(self, **kwargs: Any) -> Tuple[HistoricDate, int, int, int]:
        date, hour, minute, second = self.into_datetime(**kwargs)
        return HistoricDate.from_date(date), hour, minute, second

    def into_gregorian_datetime(self, **kwargs: Any) -> Tuple[GregorianDate, int, int, int]:
        date, hour, minute, second = self.into_datetime(**kwargs)
        return GregorianDate.from_date(date), hour, minute, second

    def into_julian_datetime(self, **kwargs: Any) -> Tuple[JulianDate, int, int, int]:
        date, hour, minute, second = self.into_datetime(**kwargs)
        return JulianDate.from_date(date), hour, minute, second

    def into_fine_historic_datetime(self, **kwargs: Any) -> Tuple[HistoricDate, int, int, int, Duration]:
        date, hour, minute, second, subsecond = self.into_fine_datetime(**kwargs)
        return HistoricDate.from_date(date), hour, minute, second, subsecond

    def into_fine_gregorian_datetime(self, **kwargs: Any) -> Tuple[GregorianDate, int, int, int, Duration]:
        date, hour, minute, second, subsecond = self.into_fine_datetime(**kwargs)
        return GregorianDate.from_date(date), hour, minute, second, subsecond

    def into_fine_julian_datetime(self, **kwargs: Any) -> Tuple[JulianDate, int, int, int, Duration]:
        date, hour, minute, second, subsecond = self.into_fine_datetime(**kwargs)
        return JulianDate.from_date(date), hour, minute, second, subsecond

    # ------------------------------------------------------------
    # Modified Julian Date
    # ------------------------------------------------------------
    @classmethod
    def from_modified_julian_date(cls: Type[T], mjd: ModifiedJulianDate) -> T:
        """Midnight starting the given MJD day; uniform scales only."""
        if not cls.scale.uniform:
            raise NotUniformScale(cls.scale.abbreviation, "from_modified_julian_date")
        return cls.from_datetime(mjd.into_date(), 0, 0, 0)

    def into_modified_julian_date(self, **kwargs: Any) -> ModifiedJulianDate:
        """MJD of the civil day containing this instant."""
        date, _, _, _ = self.into_datetime(**kwargs)
        return ModifiedJulianDate.from_date(date)

    # ------------------------------------------------------------
    # Scale conversion
    # ------------------------------------------------------------
    def into(self, target: Type[U]) -> U:
        return target(convert_time_since_epoch(self.time_since_epoch, self.scale, target.scale))

    @classmethod
    def from_time_point(cls: Type[T], other: "TimePoint") -> T:
        return other.into(cls)

    # ------------------------------------------------------------
    # Text
    # ------------------------------------------------------------
    @classmethod
    def parse(cls: Type[T], text: str, **kwargs: Any) -> T:
        """Parse "YYYY-MM-DDTHH:MM:SS[.fff] ABBR" (the abbreviation may be omitted)."""
        from ..parse.time_point import parse_time_point
        return parse_time_point(text, cls, **kwargs)

    def to_string(self, precision: Optional[int] = None, **kwargs: Any) -> str:
        date, hour, minute, second, subsecond = self.into_fine_historic_datetime(**kwargs)
        out = f"{date}T{hour:02}:{minute:02}:{second:02}"
        digits = format_digits(fractional_digits(subsecond.count, SECOND.attoseconds, precision))
        if digits:
            out += "." + digits
        return f"{out} {self.scale.abbreviation}"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return self.to_string(parse_precision(format_spec))


# ============================================================
# Leap second scales
# ============================================================

class LeapSecondTimePoint(TimePoint):
    """
    Civil time that inserts leap seconds at the end of some UTC days.

    Second 60 is accepted only in the minute that receives the leap second,
    `leap_hour`:59 local time.
    """

    leap_hour: ClassVar[int] = 23

    @classmethod
    def _utc_lookup_date(cls, date: Date, hour: int) -> Date:
        return date

    def _utc_instant(self) -> "UtcTime":
        return self.into(UtcTime)

    @classmethod
    def from_datetime(  # type: ignore[override]
        cls: Type[T],
        date: Date,
        hour: int,
        minute: int,
        second: int,
        *,
        leap_seconds: LeapSecondProvider = STATIC_LEAP_SECONDS,
    ) -> T:
        if not (0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 60):
            raise InvalidTimeOfDay(hour, minute, second)
        is_leap_day, count = leap_seconds.leap_seconds_on_date(cls._utc_lookup_date(date, hour))
        if second == 60 and not (is_leap_day and hour == cls.leap_hour and minute == 59):
            raise NonLeapSecondDateTime(cls.scale.abbreviation, date, hour, minute, second)
        days = date.elapsed_days_since(cls.scale.epoch).into_duration()
        return cls(_time_of_day(hour, minute, second) + Duration.seconds(count) + days)

    def into_datetime(self, *, leap_seconds: LeapSecondProvider = STATIC_LEAP_SECONDS) -> DateTime:
        is_leap, count = leap_seconds.leap_seconds_at_instant(self._utc_instant())
        tse = self.time_since_epoch - Duration.seconds(count)
        if is_leap:
            date, hour, minute, _ = _decompose(tse - Duration.seconds(1), self.scale.epoch)
            return date, hour, minute, 60
        return _decompose(tse, self.scale.epoch)


# ============================================================
# Concrete scales
# ============================================================

class TaiTime(TimePoint):
    scale = TAI


class UtcTime(LeapSecondTimePoint):
    scale = UTC

    def _utc_instant(self) -> "UtcTime":
        return self


class TtTime(TimePoint):
    scale = TT

    def approximate_tdb(self) -> "TdbTime":
        """TDB from the one-term periodic model, good to about 50 us (1980-2100)."""
        return TdbTime(relativistic.approximate_tdb(self.time_since_epoch))


class TcgTime(TimePoint):
    scale = TCG


class TcbTime(TimePoint):
    scale = TCB


class TdbTime(TimePoint):
    scale = TDB


class GpsTime(TimePoint):
    scale = GPST


class QzssTime(TimePoint):
    scale = QZSST


class BeiDouTime(TimePoint):
    scale = BDT


class GlonassTime(LeapSecondTimePoint):
    """
    Moscow-referenced civil time (UTC + 3 h) with UTC leap seconds.

    The UTC leap second at 23:59:60 UTC is 02:59:60 of the next GLONASST
    day, so before 03:00 the leap second bookkeeping of the previous UTC day
    applies.
    """

    scale = GLONASST
    leap_hour = 2

    @classmethod
    def _utc_lookup_date(cls, date: Date, hour: int) -> Date:
        if hour < 3:
            return date - DayCount(1)
        return date
