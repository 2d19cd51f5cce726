"""
attoscale.scales.convert
------------------------
The scale conversion graph.

Nodes are registered time scales. Every pair of scales with a TAI offset
is joined by the generic constant-offset rule; other edges are explicit
rules (TT <-> TCG, TCB <-> TDB). A conversion follows the shortest path,
so TCG -> GPST runs TCG -> TT -> GPST.

The rule table and the path cache are module state. Register rules at
import time, before any conversion runs; conversions themselves only read
the table, so they are safe to share between threads once setup is done.
"""
from __future__ import annotations

import logging
from collections import deque
from functools import lru_cache
from typing import Callable, Dict, List, Tuple

from ..core.duration import Duration
from ..core.errors import UnsupportedConversion
from . import relativistic
from .descriptors import SCALES, TimeScale

logger = logging.getLogger(__name__)

ConversionRule = Callable[[Duration], Duration]
_RULES: Dict[Tuple[str, str], ConversionRule] = {}


def register_conversion(source: str, target: str, rule: ConversionRule, *, overwrite: bool = False) -> None:
    """Add an explicit edge; `rule` maps time since source epoch to time since target epoch."""
    if (not overwrite) and ((source, target) in _RULES):
        raise KeyError(f"Conversion {source} -> {target} already exists. Use overwrite=True to replace.")
    _RULES[(source, target)] = rule
    conversion_path.cache_clear()


def terrestrial_offset(tse: Duration, source: TimeScale, target: TimeScale) -> Duration:
    """
    Constant-offset rule between two scales ticking at the TAI rate.

    The smaller of the two offset differences is applied so intermediate
    values stay small; the result is exact either way.
    """
    if source.tai_offset is None or target.tai_offset is None:
        raise UnsupportedConversion(source.abbreviation, target.abbreviation)
    epoch_offset = source.epoch.elapsed_days_since(target.epoch).into_duration()
    if source.tai_offset >= target.tai_offset:
        return tse - (source.tai_offset - target.tai_offset) + epoch_offset
    return tse + (target.tai_offset - source.tai_offset) + epoch_offset


def _neighbours(abbreviation: str) -> List[str]:
    out = [target for (source, target) in _RULES if source == abbreviation]
    scale = SCALES.get(abbreviation)
    if scale.is_terrestrial:
        for other in SCALES.list():
            if other != abbreviation and SCALES.get(other).is_terrestrial and other not in out:
                out.append(other)
    return out


@lru_cache(maxsize=None)
def conversion_path(source: str, target: str) -> Tuple[str, ...]:
    """Shortest chain of scale abbreviations from source to target (inclusive)."""
    previous: Dict[str, str] = {source: source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        if node == target:
            break
        for nxt in _neighbours(node):
            if nxt not in previous:
                previous[nxt] = node
                queue.append(nxt)
    if target not in previous:
        raise UnsupportedConversion(source, target)
    path = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    logger.debug("conversion path %s", " -> ".join(path))
    return tuple(path)


def _step(tse: Duration, source: str, target: str) -> Duration:
    rule = _RULES.get((source, target))
    if rule is not None:
        return rule(tse)
    return terrestrial_offset(tse, SCALES.get(source), SCALES.get(target))


def convert_time_since_epoch(tse: Duration, source: TimeScale, target: TimeScale) -> Duration:
    if source.abbreviation == target.abbreviation:
        return tse
    path = conversion_path(source.abbreviation, target.abbreviation)
    for a, b in zip(path, path[1:]):
        tse = _step(tse, a, b)
    return tse


register_conversion("TCG", "TT", relativistic.tcg_to_tt)
register_conversion("TT", "TCG", relativistic.tt_to_tcg)
register_conversion("TCB", "TDB", relativistic.tcb_to_tdb)
register_conversion("TDB", "TCB", relativistic.tdb_to_tcb)
