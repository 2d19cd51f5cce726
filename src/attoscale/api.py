"""
attoscale.api
-------------
Name-based entry points used by the CLI and by callers that pick scales at
run time (e.g. from configuration or user input).
"""
from __future__ import annotations

import re
from typing import Any, Dict, List, Type

from .calendar.civil import HistoricDate
from .core.duration import Duration
from .parse.duration import parse_duration
from .parse.time_point import parse_time_point
from .scales.descriptors import SCALES, TimeScale
from .scales.leap_seconds import STATIC_LEAP_SECONDS, LeapSecondProvider
from .scales.time_point import TimePoint, time_point_class

_DATE_RE = re.compile(r"^(-?\d+)-(\d{2})-(\d{2})$")


def list_scales() -> List[str]:
    return SCALES.list()


def get_scale(abbreviation: str) -> TimeScale:
    return SCALES.get(abbreviation)


def scale_info(abbreviation: str) -> Dict[str, object]:
    return SCALES.get(abbreviation).info()


def time_point_type(abbreviation: str) -> Type[TimePoint]:
    return time_point_class(abbreviation)


def convert(point: TimePoint, target: str) -> TimePoint:
    """Convert to the scale named by `target`, e.g. convert(t, "GPST")."""
    return point.into(time_point_class(target))


def parse(text: str, **kwargs: Any) -> TimePoint:
    """Parse an instant whose scale is given by its trailing abbreviation."""
    return parse_time_point(text, **kwargs)


def duration(text: str) -> Duration:
    return parse_duration(text)


def parse_ymd(text: str) -> HistoricDate:
    """Historic calendar date from YYYY-MM-DD; astronomical years may be negative."""
    m = _DATE_RE.match(text.strip())
    if m is None:
        raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
    return HistoricDate(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def leap_seconds_on(text: str, *, leap_seconds: LeapSecondProvider = STATIC_LEAP_SECONDS) -> Dict[str, object]:
    """Leap second state of the UTC day "YYYY-MM-DD"."""
    date = parse_ymd(text).into_date()
    is_leap_day, count = leap_seconds.leap_seconds_on_date(date)
    return {"date": str(date), "leap_second_day": is_leap_day, "tai_minus_utc": count}
