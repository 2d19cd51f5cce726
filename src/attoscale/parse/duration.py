"""
attoscale.parse.duration
------------------------
ISO-8601 durations: [-]P[nY][nM][nD][T[nH][nM][n[.f]S]]

- Designators appear in strictly decreasing unit order.
- M means months before any day/time component and minutes after.
- H and S are also accepted without the T separator ("P1H").
- Only the last component may carry a decimal fraction.
- Years and months are the average Gregorian ratios of core.units.

Output of Duration.to_iso() parses back to the same value.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from ..core.duration import Duration
from ..core.errors import (
    ExpectedDurationDesignator,
    ExpectedDurationPrefix,
    FractionNotLast,
    InvalidNumber,
    NonDecreasingDesignators,
    UnexpectedRemainder,
)
from ..core.units import DAY, HOUR, MINUTE, MONTH, SECOND, YEAR, UnitRatio
from ._cursor import Cursor


class Designator(Enum):
    YEARS = "years"
    MONTHS = "months"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"

    @property
    def unit(self) -> UnitRatio:
        return _UNITS[self]

    @property
    def rank(self) -> int:
        return _ORDER.index(self)


_UNITS: Dict[Designator, UnitRatio] = {
    Designator.YEARS: YEAR,
    Designator.MONTHS: MONTH,
    Designator.DAYS: DAY,
    Designator.HOURS: HOUR,
    Designator.MINUTES: MINUTE,
    Designator.SECONDS: SECOND,
}
_ORDER: List[Designator] = list(Designator)
_DATE_PART = (Designator.YEARS, Designator.MONTHS, Designator.DAYS)


def _designator(char: Optional[str], in_time: bool, last: Optional[Designator]) -> Optional[Designator]:
    if char == "Y":
        return Designator.YEARS
    if char == "M":
        if not in_time and last in (None, Designator.YEARS):
            return Designator.MONTHS
        return Designator.MINUTES
    if char == "D":
        return Designator.DAYS
    if char == "H":
        return Designator.HOURS
    if char == "S":
        return Designator.SECONDS
    return None


def _component(whole: int, fraction: str, unit: UnitRatio) -> Duration:
    out = whole * unit.attoseconds
    if fraction:
        scale = 10 ** len(fraction)
        out += (int(fraction) * unit.attoseconds + scale // 2) // scale
    return Duration(out)


def parse_duration(text: str) -> Duration:
    cur = Cursor(text)
    negative = cur.accept("-")
    if not cur.accept("P"):
        raise ExpectedDurationPrefix(text, cur.pos)

    total = Duration.zero()
    last: Optional[Designator] = None
    in_time = False
    fraction_at: Optional[int] = None

    while not cur.at_end():
        if cur.accept("T"):
            if in_time:
                raise UnexpectedRemainder(text, cur.pos - 1)
            in_time = True
            continue

        char = cur.peek()
        if char == ".":
            raise InvalidNumber(text, cur.pos)
        if not char.isdigit():
            raise UnexpectedRemainder(text, cur.pos)
        if fraction_at is not None:
            raise FractionNotLast(text, fraction_at)

        start = cur.pos
        whole, fraction = cur.decimal()
        designator = _designator(cur.peek(), in_time, last)
        if designator is None or (in_time and designator in _DATE_PART):
            raise ExpectedDurationDesignator(text, cur.pos)
        if last is not None and designator.rank <= last.rank:
            raise NonDecreasingDesignators(designator.value, text, cur.pos)
        cur.pos += 1

        total += _component(whole, fraction, designator.unit)
        if fraction:
            fraction_at = start
        last = designator

    return -total if negative else total
