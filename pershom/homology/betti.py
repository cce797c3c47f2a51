"""
pershom/homology/betti.py

Betti numbers from an unreduced and a reduced boundary matrix.

    beta_p = z_p - l_p

where z_p counts p-simplex columns that reduce to zero (p-cycles) and l_p
counts pivots lying in p-simplex rows (p-cycles that are boundaries).
"""

from __future__ import annotations

from typing import List, Set

import numpy as np

from pershom.errors import DimensionOutOfRange
from pershom.filtration.boundary import simplex_dimension


def betti(original: List[Set[int]], reduced: List[Set[int]], p: int) -> int:
    """
    p-th Betti number of the complex behind a boundary matrix.

    Args:
        original: Unreduced boundary columns
        reduced: The same columns after reduction
        p: Homological dimension

    Returns:
        beta_p, clamped at 0

    Raises:
        DimensionOutOfRange: if p is negative or above the top simplex dimension
    """
    sdims = np.array([simplex_dimension(c) for c in original], dtype=np.int64)
    top = int(sdims.max()) if sdims.size else -1
    if p < 0 or p > top:
        raise DimensionOutOfRange(
            f"Cannot calculate {p}-dimensional Betti number for {top}-complex"
        )

    empty = np.array([not c for c in reduced], dtype=bool)
    # the number of zero columns that correspond to p-simplices
    z = int(np.count_nonzero(empty & (sdims == p)))
    # the number of lowest ones in rows that correspond to p-simplices
    lows = np.array([max(c) - 1 for c in reduced if c], dtype=np.int64)
    l = int(np.count_nonzero(sdims[lows] == p)) if lows.size else 0

    beta = z - l
    return beta if beta > 0 else 0
