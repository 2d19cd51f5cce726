#!/usr/bin/env python3
"""
attoscale.design.rate_params
----------------------------
Derives the exact rational rate constants used by scales.relativistic from
the IAU decimal definitions, and prints continued-fraction convergents
for shorter approximations.

  L_G = 6.969290134e-10   (IAU 2000 B1.9)
  L_B = 1.550519768e-8    (IAU 2006 B3)
  TDB0 = -6.55e-5 s       (IAU 2006 B3)

The forward direction multiplies by L, the reverse by L / (1 - L).
"""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Tuple

from attoscale.scales import relativistic as rel

L_G_DECIMAL = "6.969290134e-10"
L_B_DECIMAL = "1.550519768e-8"
TDB0_DECIMAL = "-6.55e-5"


def get_convergents(x: Fraction, max_den: int = 10**12) -> List[Tuple[int, int]]:
    """
    Continued fraction convergents (p, q) of an exact rational x.
    Stops when the denominator would exceed max_den or the expansion ends.
    """
    sign = -1 if x < 0 else 1
    rem = abs(x)
    convergents: List[Tuple[int, int]] = []
    h_prev, k_prev = 1, 0
    a = rem.numerator // rem.denominator
    h, k = a, 1
    rem -= a

    while k <= max_den:
        convergents.append((sign * h, k))
        if rem == 0:
            break
        inv = 1 / rem
        a = inv.numerator // inv.denominator
        rem = inv - a
        h, h_prev = a * h + h_prev, h
        k, k_prev = a * k + k_prev, k

    return convergents


@dataclass(frozen=True)
class RateConstants:
    name: str
    rate: Fraction

    @property
    def inverse(self) -> Fraction:
        """L / (1 - L)"""
        return self.rate / (1 - self.rate)


def derive() -> Tuple[RateConstants, RateConstants, Fraction]:
    return (
        RateConstants("L_G", Fraction(L_G_DECIMAL)),
        RateConstants("L_B", Fraction(L_B_DECIMAL)),
        Fraction(TDB0_DECIMAL),
    )


def check_constants() -> List[str]:
    """Mismatches between the derived rationals and the literals in use."""
    l_g, l_b, tdb0 = derive()
    checks = [
        ("L_G", l_g.rate, Fraction(rel.L_G_NUMERATOR, rel.L_G_DENOMINATOR)),
        ("L_G / (1 - L_G)", l_g.inverse, Fraction(rel.L_G_NUMERATOR, rel.L_G_INVERSE_DENOMINATOR)),
        ("L_B", l_b.rate, Fraction(rel.L_B_NUMERATOR, rel.L_B_DENOMINATOR)),
        ("L_B / (1 - L_B)", l_b.inverse, Fraction(rel.L_B_NUMERATOR, rel.L_B_INVERSE_DENOMINATOR)),
        ("TDB0 [s]", tdb0, Fraction(rel.TDB_0.count, 10**18)),
    ]
    return [f"{name}: derived {want} != used {got}" for name, want, got in checks if want != got]


def print_constant(name: str, value: Fraction, max_den: int) -> None:
    print(f"\n--- {name} ---")
    print(f"Exact: {value.numerator}/{value.denominator}")
    print(f"{'Fraction (p/q)':<36} | {'Relative error'}")
    print("-" * 56)
    for num, den in get_convergents(value, max_den=max_den):
        err = (Fraction(num, den) - value) / value
        print(f"{f'{num}/{den}':<36} | {float(err):+.3e}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Derive the relativistic rate constants as exact rationals.")
    p.add_argument("--max-den", type=int, default=10**12, help="Largest convergent denominator to print.")
    p.add_argument("--check", action="store_true", help="Only verify the constants in use; exit 1 on mismatch.")
    args = p.parse_args(argv)

    problems = check_constants()
    if not args.check:
        l_g, l_b, tdb0 = derive()
        for c in (l_g, l_b):
            print_constant(c.name, c.rate, args.max_den)
            print_constant(f"{c.name} / (1 - {c.name})", c.inverse, args.max_den)
        print(f"\nTDB0 = {tdb0} s = {tdb0 * 10**9} ns")

    print()
    if problems:
        for line in problems:
            print("MISMATCH", line)
        return 1
    print("All rate constants match their IAU definitions.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
