"""
attoscale.core.duration
-----------------------
Signed fixed-point durations with attosecond resolution.

The count is a plain Python int restricted to the signed 128-bit range
(about +-5.4e12 years). Leaving that range raises OverflowError; it is a
programming error and is never handled inside the package.

Integer division follows the fixed-point convention and truncates toward
zero, unlike Python's `//` on ints which floors.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Union

from .digits import fractional_digits, format_digits
from .units import (
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

I128_MIN = -(1 << 127)
I128_MAX = (1 << 127) - 1


def trunc_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def parse_precision(format_spec: str) -> Optional[int]:
    """Accepts "" or ".N" (as in `format(x, ".9")`)."""
    if not format_spec:
        return None
    if format_spec.startswith(".") and format_spec[1:].isdigit():
        return int(format_spec[1:])
    raise ValueError(f"Invalid format specifier '{format_spec}', expected '.N'")


@dataclass(frozen=True, order=True)
class Duration:
    count: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"Duration count must be an int, got {type(self.count).__name__}")
        if not I128_MIN <= self.count <= I128_MAX:
            raise OverflowError(f"duration of {self.count} attoseconds exceeds the 128-bit range")

    # ------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------
    @classmethod
    def zero(cls) -> "Duration":
        return cls(0)

    @classmethod
    def from_unit(cls, count: int, unit: UnitRatio) -> "Duration":
        return cls(count * unit.attoseconds)

    @classmethod
    def attoseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, ATTO)

    @classmethod
    def femtoseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, FEMTO)

    @classmethod
    def picoseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, PICO)

    @classmethod
    def nanoseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, NANO)

    @classmethod
    def microseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, MICRO)

    @classmethod
    def milliseconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, MILLI)

    @classmethod
    def seconds(cls, count: int) -> "Duration":
        return cls.from_unit(count, SECOND)

    @classmethod
    def minutes(cls, count: int) -> "Duration":
        return cls.from_unit(count, MINUTE)

    @classmethod
    def hours(cls, count: int) -> "Duration":
        return cls.from_unit(count, HOUR)

    @classmethod
    def days(cls, count: int) -> "Duration":
        return cls.from_unit(count, DAY)

    @classmethod
    def weeks(cls, count: int) -> "Duration":
        return cls.from_unit(count, WEEK)

    @classmethod
    def months(cls, count: int) -> "Duration":
        return cls.from_unit(count, MONTH)

    @classmethod
    def years(cls, count: int) -> "Duration":
        return cls.from_unit(count, YEAR)

    @classmethod
    def parse(cls, text: str) -> "Duration":
        """Parse an ISO-8601 duration such as "P1DT2H0.5S"."""
        from ..parse.duration import parse_duration
        return parse_duration(text)

    # ------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------
    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.count + other.count)

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.count - other.count)

    def __neg__(self) -> "Duration":
        return Duration(-self.count)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return Duration(abs(self.count))

    def __mul__(self, other: Any) -> "Duration":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(self.count * other)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> Union["Duration", int]:
        """Duration // int -> Duration and Duration // Duration -> int, truncating."""
        if isinstance(other, Duration):
            return trunc_div(self.count, other.count)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return Duration(trunc_div(self.count, other))

    def __bool__(self) -> bool:
        return self.count != 0

    def is_zero(self) -> bool:
        return self.count == 0

    def is_positive(self) -> bool:
        return self.count > 0

    def is_negative(self) -> bool:
        return self.count < 0

    def signum(self) -> int:
        return (self.count > 0) - (self.count < 0)

    # ------------------------------------------------------------
    # Unit conversion and rounding
    # ------------------------------------------------------------
    def round(self, unit: UnitRatio) -> "Duration":
        """Nearest multiple of `unit`; half a unit is added before truncation."""
        u = unit.attoseconds
        return Duration(trunc_div(self.count + u // 2, u) * u)

    def ceil(self, unit: UnitRatio) -> "Duration":
        u = unit.attoseconds
        return Duration(-((-self.count) // u) * u)

    def floor(self, unit: UnitRatio) -> "Duration":
        u = unit.attoseconds
        return Duration((self.count // u) * u)

    def truncate(self, unit: UnitRatio) -> "Duration":
        u = unit.attoseconds
        return Duration(trunc_div(self.count, u) * u)

    def factor_out(self, unit: UnitRatio, *, floor: bool = False) -> Tuple[int, "Duration"]:
        """
        Split into whole units and a remainder smaller than one unit.

        By default the quotient truncates toward zero so the remainder takes
        the sign of self; with floor=True the remainder is never negative.
        """
        u = unit.attoseconds
        if floor:
            whole, rest = divmod(self.count, u)
        else:
            whole = trunc_div(self.count, u)
            rest = self.count - whole * u
        return whole, Duration(rest)

    def div_round(self, divisor: int) -> "Duration":
        """Divide by an integer, rounding half a divisor up before truncation."""
        return Duration(trunc_div(self.count + trunc_div(divisor, 2), divisor))

    def as_float(self, unit: UnitRatio = SECOND, dtype: Callable[[Any], Any] = float) -> Any:
        """
        Floating value in `unit`.

        The integer quotient and the remainder are converted separately so
        large counts keep their sub-unit precision as far as `dtype` allows.
        """
        whole, rest = self.factor_out(unit)
        return dtype(whole) + dtype(rest.count) / dtype(unit.attoseconds)

    # ------------------------------------------------------------
    # Display
    # ------------------------------------------------------------
    def to_iso(self, precision: Optional[int] = None) -> str:
        """ISO-8601 text, e.g. "P1DT2H3M4.5S"; the zero duration is "PT"."""
        days, rest = self.factor_out(DAY)
        hours, rest = rest.factor_out(HOUR)
        minutes, rest = rest.factor_out(MINUTE)
        seconds, rest = rest.factor_out(SECOND)

        out = ["-P" if self.count < 0 else "P"]
        if days:
            out.append(f"{abs(days)}D")
        out.append("T")
        if hours:
            out.append(f"{abs(hours)}H")
        if minutes:
            out.append(f"{abs(minutes)}M")
        if seconds or rest:
            out.append(str(abs(seconds)))
            digits = format_digits(fractional_digits(rest.count, SECOND.attoseconds, precision))
            if digits:
                out.append("." + digits)
            out.append("S")
        return "".join(out)

    def __str__(self) -> str:
        return self.to_iso()

    def __format__(self, format_spec: str) -> str:
        return self.to_iso(parse_precision(format_spec))
