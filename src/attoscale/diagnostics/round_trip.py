"""
attoscale.diagnostics.round_trip
--------------------------------
Random round-trip statistics for the rate-corrected conversions:

  TT -> TCG -> TT
  TDB -> TCB -> TDB

Samples are drawn uniformly from [-2^bits, 2^bits] attoseconds around the
1977 reference epoch. Requires numpy (and matplotlib for --plot).
"""
from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from attoscale.core.duration import Duration
from attoscale.scales import relativistic as rel

logger = logging.getLogger(__name__)

Rule = Callable[[Duration], Duration]

PAIRS: Dict[str, Tuple[str, Rule, Rule]] = {
    "tt-tcg": ("TT -> TCG -> TT", rel.tt_to_tcg, rel.tcg_to_tt),
    "tdb-tcb": ("TDB -> TCB -> TDB", rel.tdb_to_tcb, rel.tcb_to_tdb),
}


@dataclass(frozen=True)
class RoundTripStats:
    label: str
    n: int
    bits: int
    max_abs: int
    mean: float
    std: float
    nonzero: int


def round_trip_errors(pair: str, n: int, bits: int, seed: int):
    """Array of (back(forth(x)) - x) in attoseconds, as numpy int64."""
    import numpy as np

    if pair not in PAIRS:
        raise KeyError(f"Unknown pair '{pair}'. Available: {sorted(PAIRS)}")
    _, forth, back = PAIRS[pair]
    rng = random.Random(seed)
    bound = 1 << bits
    errors = np.empty(n, dtype=np.int64)
    for i in range(n):
        x = rel.REFERENCE_EPOCH + Duration(rng.randint(-bound, bound))
        errors[i] = (back(forth(x)) - x).count
    logger.debug("%s: %d samples at 2^%d attoseconds", pair, n, bits)
    return errors


def summarize(pair: str, errors, bits: int) -> RoundTripStats:
    import numpy as np

    return RoundTripStats(
        label=PAIRS[pair][0],
        n=int(errors.size),
        bits=bits,
        max_abs=int(np.max(np.abs(errors))) if errors.size else 0,
        mean=float(np.mean(errors)) if errors.size else 0.0,
        std=float(np.std(errors)) if errors.size else 0.0,
        nonzero=int(np.count_nonzero(errors)),
    )


def plot_errors(results: Dict[str, object]) -> None:
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, len(results), figsize=(5 * len(results), 4), squeeze=False)
    for ax, (pair, errors) in zip(axes[0], results.items()):
        ax.hist(errors, bins=50)
        ax.set_title(PAIRS[pair][0])
        ax.set_xlabel("round-trip error [as]")
        ax.set_ylabel("count")
    fig.tight_layout()
    plt.show()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip error of the relativistic scale conversions.")
    p.add_argument("--pair", choices=sorted(PAIRS) + ["all"], default="all")
    p.add_argument("--N", type=int, default=10000, help="Samples per pair.")
    p.add_argument("--bits", type=int, default=31, help="Sample magnitude, 2^bits attoseconds.")
    p.add_argument("--seed", type=int, default=42, help="RNG seed.")
    p.add_argument("--max-error", type=int, default=10, help="Fail when any error reaches this many attoseconds.")
    p.add_argument("--plot", action="store_true", help="Show histograms (needs matplotlib).")
    args = p.parse_args(argv)

    pairs = sorted(PAIRS) if args.pair == "all" else [args.pair]
    results = {}
    failed = False

    print(f"{'conversion':<20} {'N':>7} {'bits':>5} {'max|err|':>10} {'mean':>10} {'std':>10} {'nonzero':>8}")
    print("-" * 76)
    for pair in pairs:
        errors = round_trip_errors(pair, args.N, args.bits, args.seed)
        results[pair] = errors
        s = summarize(pair, errors, args.bits)
        print(f"{s.label:<20} {s.n:>7} {s.bits:>5} {s.max_abs:>10} {s.mean:>10.3f} {s.std:>10.3f} {s.nonzero:>8}")
        if s.max_abs >= args.max_error:
            failed = True
            logger.warning("%s exceeds %d as: max |error| = %d as", s.label, args.max_error, s.max_abs)

    if args.plot:
        plot_errors(results)
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
