from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from ..core.duration import Duration
from ..core.errors import InvalidNumber, UnknownScaleAbbreviation
from ..core.units import SECOND
from ..scales.time_point import TimePoint, time_point_class
from ._cursor import Cursor

T = TypeVar("T", bound=TimePoint)


def _subsecond(fraction: str) -> Duration:
    scale = 10 ** len(fraction)
    return Duration((int(fraction) * SECOND.attoseconds + scale // 2) // scale)


def parse_time_point(text: str, cls: Optional[Type[T]] = None, **kwargs: Any) -> T:
    """
    Parse "YYYY-MM-DDTHH:MM:SS[.fff] ABBR" in the historic calendar.

    With `cls` given the abbreviation is optional and must match cls's scale;
    without it the abbreviation selects the class. Extra keyword arguments
    (e.g. leap_seconds=...) go to the constructor.
    """
    cur = Cursor(text)
    year = cur.integer(signed=True)
    cur.expect("-")
    month = cur.integer(width=2)
    cur.expect("-")
    day = cur.integer(width=2)
    cur.expect("T")
    hour = cur.integer(width=2)
    cur.expect(":")
    minute = cur.integer(width=2)
    cur.expect(":")
    second = cur.integer(width=2)
    subsecond = Duration.zero()
    if cur.accept("."):
        fraction = cur.digits()
        if not fraction:
            raise InvalidNumber(text, cur.pos)
        subsecond = _subsecond(fraction)

    if cls is None or not cur.at_end():
        cur.expect(" ")
        start = cur.pos
        abbreviation = cur.word()
        if cls is None:
            try:
                cls = time_point_class(abbreviation)  # type: ignore[assignment]
            except KeyError:
                raise UnknownScaleAbbreviation(abbreviation, "a known scale", text, start) from None
        elif abbreviation != cls.scale.abbreviation:
            raise UnknownScaleAbbreviation(abbreviation, cls.scale.abbreviation, text, start)
    cur.finish()

    assert cls is not None
    return cls.from_fine_historic_datetime(year, month, day, hour, minute, second, subsecond, **kwargs)
