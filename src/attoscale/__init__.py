"""attoscale public API.

Keep this surface small: users should mostly interact with the names re-exported here.
"""

from .api import (
    convert,
    duration,
    get_scale,
    leap_seconds_on,
    list_scales,
    parse,
    parse_ymd,
    scale_info,
    time_point_type,
)
from .calendar.civil import GregorianDate, HistoricDate, JulianDate
from .calendar.date import Date, Month, WeekDay
from .calendar.mjd import ModifiedJulianDate
from .core.days import DayCount
from .core.duration import Duration
from .core.errors import AttoscaleError
from .core.units import (
    ATTO,
    DAY,
    FEMTO,
    HOUR,
    MICRO,
    MILLI,
    MINUTE,
    MONTH,
    NANO,
    PICO,
    SECOND,
    WEEK,
    YEAR,
    UnitRatio,
)
from .scales.convert import register_conversion
from .scales.descriptors import TimeScale
from .scales.leap_seconds import STATIC_LEAP_SECONDS, LeapSecondProvider, StaticLeapSecondProvider
from .scales.time_point import (
    BeiDouTime,
    GlonassTime,
    GpsTime,
    QzssTime,
    TaiTime,
    TcbTime,
    TcgTime,
    TdbTime,
    TimePoint,
    TtTime,
    UtcTime,
)

__all__ = [
    "convert",
    "duration",
    "get_scale",
    "leap_seconds_on",
    "list_scales",
    "parse",
    "parse_ymd",
    "scale_info",
    "time_point_type",
    "GregorianDate",
    "HistoricDate",
    "JulianDate",
    "Date",
    "Month",
    "WeekDay",
    "ModifiedJulianDate",
    "DayCount",
    "Duration",
    "AttoscaleError",
    "UnitRatio",
    "ATTO",
    "FEMTO",
    "PICO",
    "NANO",
    "MICRO",
    "MILLI",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "register_conversion",
    "TimeScale",
    "LeapSecondProvider",
    "StaticLeapSecondProvider",
    "STATIC_LEAP_SECONDS",
    "TimePoint",
    "TaiTime",
    "UtcTime",
    "TtTime",
    "TcgTime",
    "TcbTime",
    "TdbTime",
    "GpsTime",
    "QzssTime",
    "BeiDouTime",
    "GlonassTime",
]
