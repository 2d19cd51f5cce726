"""
attoscale.scales.relativistic
-----------------------------
Rate-corrected relations between TT and TCG, and between TDB and TCB
(IAU 1991 / 2000 / 2006 resolutions), in exact fixed-point arithmetic.

All functions take and return a time since the 1977-01-01 epoch shared by
TT, TCG, TCB and TDB.

  L_G = 6.969290134e-10 = 3_484_645_067 / 5e18
  L_B = 1.550519768e-8  =   193_814_971 / 1.25e16

Each direction divides by its own literal denominator: the forward map
multiplies by L, the reverse by L / (1 - L). Neither is derived from the
other at run time; the pair is chosen so that forward-then-back returns
within a few attoseconds.
"""
from __future__ import annotations

import math

from ..calendar.civil import HistoricDate
from ..calendar.date import Month
from ..core.duration import Duration
from ..core.units import DAY
from .descriptors import TT

# 1977-01-01T00:00:32.184 TT, the instant where TT, TCG and TCB agree
REFERENCE_EPOCH = Duration.milliseconds(32_184)

L_G_NUMERATOR = 3_484_645_067
L_G_DENOMINATOR = 5_000_000_000_000_000_000
L_G_INVERSE_DENOMINATOR = 4_999_999_996_515_354_933

L_B_NUMERATOR = 193_814_971
L_B_DENOMINATOR = 12_500_000_000_000_000
L_B_INVERSE_DENOMINATOR = 12_499_999_806_185_029

# TDB - TCB at the reference epoch
TDB_0 = Duration.nanoseconds(-65_500)
# TCB - TDB at the reference epoch, i.e. -TDB_0 / (1 - L_B)
TCB_0 = Duration.nanoseconds(65_500 * L_B_DENOMINATOR).div_round(L_B_INVERSE_DENOMINATOR)


# ============================================================
# TT <-> TCG
# ============================================================

def tcg_to_tt(tcg: Duration) -> Duration:
    delta = tcg - REFERENCE_EPOCH
    rate = (delta * L_G_NUMERATOR).div_round(L_G_DENOMINATOR)
    return REFERENCE_EPOCH + delta - rate


def tt_to_tcg(tt: Duration) -> Duration:
    delta = tt - REFERENCE_EPOCH
    rate = (delta * L_G_NUMERATOR).div_round(L_G_INVERSE_DENOMINATOR)
    return REFERENCE_EPOCH + delta + rate


# ============================================================
# TDB <-> TCB
# ============================================================

def tcb_to_tdb(tcb: Duration) -> Duration:
    delta = tcb - REFERENCE_EPOCH
    rate = (delta * L_B_NUMERATOR).div_round(L_B_DENOMINATOR)
    return delta - rate + REFERENCE_EPOCH + TDB_0


def tdb_to_tcb(tdb: Duration) -> Duration:
    delta = tdb - REFERENCE_EPOCH
    rate = (delta * L_B_NUMERATOR).div_round(L_B_INVERSE_DENOMINATOR)
    return delta + rate + TCB_0 + REFERENCE_EPOCH


# ============================================================
# Approximate TT -> TDB
# ============================================================

# 2000-01-01T12:00:00 TT
J2000 = (
    HistoricDate(2000, Month.JANUARY, 1).into_date().elapsed_days_since(TT.epoch).into_duration()
    + Duration.hours(12)
)

PERIODIC_AMPLITUDE = 0.001657  # seconds
MEAN_ANOMALY_AT_J2000 = 6.24  # radians
MEAN_ANOMALY_RATE = 0.017202  # radians per day


def approximate_tdb_minus_tt(tt: Duration) -> Duration:
    """
    TDB - TT from the one-term periodic model

        TDB - TT = 0.001657 s * sin(6.24 + 0.017202 * (days since J2000))

    This is an approximation, good to about 50 microseconds between 1980 and
    2100. It is not invertible and not used by the conversion graph.
    """
    days = (tt - J2000).as_float(DAY)
    g = MEAN_ANOMALY_AT_J2000 + MEAN_ANOMALY_RATE * days
    offset_seconds = PERIODIC_AMPLITUDE * math.sin(g)
    return Duration(round(offset_seconds * 1e18))


def approximate_tdb(tt: Duration) -> Duration:
    return tt + approximate_tdb_minus_tt(tt)
