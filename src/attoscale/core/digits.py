from __future__ import annotations

from typing import Iterator, Optional

ABSOLUTE_MAX_DIGITS = 64


def fractional_digits(
    numerator: int,
    denominator: int,
    precision: Optional[int] = None,
    base: int = 10,
) -> Iterator[int]:
    """
    Digits of the fractional part of |numerator| / denominator in `base`.

    With `precision` exactly that many digits are produced (trailing zeros
    included); without it, digits stop once the remainder is exhausted.
    Never more than ABSOLUTE_MAX_DIGITS digits are produced.
    """
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    if base < 2:
        raise ValueError("base must be at least 2")
    limit = ABSOLUTE_MAX_DIGITS if precision is None else min(precision, ABSOLUTE_MAX_DIGITS)
    remainder = abs(numerator) % denominator
    produced = 0
    while produced < limit:
        if precision is None and remainder == 0:
            return
        remainder *= base
        digit, remainder = divmod(remainder, denominator)
        produced += 1
        yield digit


def format_digits(digits: Iterator[int]) -> str:
    return "".join("0123456789abcdefghijklmnopqrstuvwxyz"[d] for d in digits)
