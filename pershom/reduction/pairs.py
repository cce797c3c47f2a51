"""
pershom/reduction/pairs.py

Persistence pairs and intervals from a reduced boundary matrix.

A nonempty reduced column j with pivot i pairs the birth of the class created
by cell i with its death at cell j. An empty column that is never used as a
pivot is an essential class and gets a semi-infinite pair.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, NamedTuple, Set, Union

from pershom.core.order import TotalOrder
from pershom.filtration.boundary import build_boundary_matrix
from pershom.filtration.filtration import Filtration
from pershom.reduction.reducers import Reduction, reduce_columns

logger = logging.getLogger(__name__)


class PersistencePair(NamedTuple):
    """Birth/death filtration positions; death is math.inf if essential."""
    birth: int
    death: Union[int, float]

    @property
    def essential(self) -> bool:
        return math.isinf(self.death)


class Interval(NamedTuple):
    """Lifespan of a feature in filtration values."""
    start: Any
    end: Any

    @property
    def essential(self) -> bool:
        return isinstance(self.end, float) and math.isinf(self.end)

    def __str__(self) -> str:
        return f"[{self.start},{self.end})"


def generate_pairs(reduced_columns: List[Set[int]], reduced: bool = False) -> List[PersistencePair]:
    """
    Generate persistence pairs from reduced columns.

    Args:
        reduced_columns: Reduced boundary columns (1-based ids)
        reduced: Columns carry the augmentation at id 1; ids are shifted
            down by one so that pairs refer to filtration positions

    Returns:
        Finite pairs in death order, then essential pairs by ascending birth
    """
    ridx = 1 if reduced else 0
    births: Set[int] = set()
    pairs: List[PersistencePair] = []
    for i, col in enumerate(reduced_columns, start=1):
        if col:
            b = max(col)
            d = i
            births.discard(b)
            births.discard(d)
            if d > b:
                pairs.append(PersistencePair(b - ridx, d - ridx))
        else:
            births.add(i)

    # No lowest one: semi-infinite interval
    for i in sorted(births):
        pairs.append(PersistencePair(i - ridx, math.inf))
    return pairs


def intervals(
    order: TotalOrder,
    pairs: List[PersistencePair],
    complex_dimension: int,
    length0: bool = False,
) -> Dict[int, List[Interval]]:
    """
    Birth-death intervals per homological dimension.

    Args:
        order: Total order map of the filtration
        pairs: Persistence pairs (filtration positions)
        complex_dimension: Dimension of the complex; only dimensions
            0 <= p < complex_dimension are reported
        length0: Keep zero-length intervals

    Returns:
        Map from dimension to its intervals
    """
    out: Dict[int, List[Interval]] = {}
    for b, d in pairs:
        if b < 1:
            # Augmentation vertex
            continue
        s = order.value(b)
        e = d if math.isinf(d) else order.value(d)
        if (s > e) if length0 else (s >= e):
            continue

        idim = order.dimension(b)
        if 0 <= idim < complex_dimension:
            out.setdefault(idim, []).append(Interval(s, e))
    return out


def persistence_pairs(
    flt: Filtration,
    reduction: Union[str, Reduction] = Reduction.TWIST,
    reduced: bool = False,
):
    """
    Raw persistence pairs of a filtration.

    Returns:
        (pairs, reduced_columns)
    """
    bm = build_boundary_matrix(flt, reduced=reduced)
    R = reduce_columns(bm.columns, reduction, copy=False)
    return generate_pairs(R, reduced=reduced), R


def persistence_intervals(
    flt: Filtration,
    reduction: Union[str, Reduction] = Reduction.TWIST,
    reduced: bool = False,
    length0: bool = False,
) -> Dict[int, List[Interval]]:
    """Birth-death intervals per dimension for a filtration."""
    bm = build_boundary_matrix(flt, reduced=reduced)
    R = reduce_columns(bm.columns, reduction, copy=False)
    ps = generate_pairs(R, reduced=reduced)
    logger.debug("%d persistence pairs", len(ps))
    return intervals(bm.order, ps, flt.dimension(), length0=length0)
