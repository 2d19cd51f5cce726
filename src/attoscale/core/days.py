from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .duration import Duration, trunc_div

I32_MIN = -(1 << 31)
I32_MAX = (1 << 31) - 1


@dataclass(frozen=True, order=True)
class DayCount:
    """Signed number of whole days, limited to the 32-bit range."""
    count: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int):
            raise TypeError(f"DayCount must be an int, got {type(self.count).__name__}")
        if not I32_MIN <= self.count <= I32_MAX:
            raise OverflowError(f"day count {self.count} exceeds the 32-bit range")

    @classmethod
    def weeks(cls, count: int) -> "DayCount":
        return cls(7 * count)

    def into_duration(self) -> Duration:
        return Duration.days(self.count)

    def __add__(self, other: Any) -> "DayCount":
        if not isinstance(other, DayCount):
            return NotImplemented
        return DayCount(self.count + other.count)

    def __sub__(self, other: Any) -> "DayCount":
        if not isinstance(other, DayCount):
            return NotImplemented
        return DayCount(self.count - other.count)

    def __neg__(self) -> "DayCount":
        return DayCount(-self.count)

    def __mul__(self, other: Any) -> "DayCount":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return DayCount(self.count * other)

    __rmul__ = __mul__

    def __floordiv__(self, other: Any) -> "DayCount":
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return DayCount(trunc_div(self.count, other))

    def __bool__(self) -> bool:
        return self.count != 0

    def __int__(self) -> int:
        return self.count

    def __str__(self) -> str:
        return f"{self.count} days"
