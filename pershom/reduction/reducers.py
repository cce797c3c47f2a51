"""
pershom/reduction/reducers.py

Column reduction of a boundary matrix over GF(2).

Both strategies bring the matrix into reduced form: no two nonempty columns
share a pivot (lowest one). Adding column k to column j is the symmetric
difference of their row sets.

- Standard: columns left to right.
- Twist: columns grouped by dimension, highest first, with clearing. When
  column j claims pivot row i, column i is a birth and is zeroed without
  being reduced.

Both produce the same persistence pairs.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Set, Union

logger = logging.getLogger(__name__)

Column = Set[int]


class Reduction(Enum):
    """Reduction strategy."""
    STANDARD = "standard"
    TWIST = "twist"

    @classmethod
    def parse(cls, value: Union[str, "Reduction"]) -> "Reduction":
        """Accept a Reduction or its name ('standard', 'twist')."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            names = ", ".join(r.value for r in cls)
            raise ValueError(f"Unknown reduction '{value}' (expected one of: {names})") from None


def pivot(col: Column) -> Optional[int]:
    """Lowest one (maximum row id) of a column, None if empty."""
    return max(col) if col else None


def _eliminate(columns: List[Column], j: int, lowest_one: List[Optional[int]]) -> int:
    """
    Reduce column id j against the columns owning its pivots.

    Returns the number of column additions performed.
    """
    col = columns[j - 1]
    adds = 0
    low = pivot(col)
    while low is not None and lowest_one[low] is not None:
        col ^= columns[lowest_one[low] - 1]
        adds += 1
        low = pivot(col)
    if low is not None:
        lowest_one[low] = j
    return adds


def standard_reduction(columns: List[Column]) -> List[Column]:
    """
    Standard reduction, in place.

    Args:
        columns: columns[j - 1] is the row set of column id j

    Returns:
        The same list, reduced
    """
    n = len(columns)
    lowest_one: List[Optional[int]] = [None] * (n + 1)
    adds = 0
    for j in range(1, n + 1):
        adds += _eliminate(columns, j, lowest_one)
    logger.debug("Standard reduction: %d columns, %d additions", n, adds)
    return columns


def twist_reduction(columns: List[Column]) -> List[Column]:
    """
    Twist reduction, in place.

    Columns are swept by their unreduced size (dimension + 1), largest
    first; within a size, by ascending column id.

    Args:
        columns: columns[j - 1] is the row set of column id j

    Returns:
        The same list, reduced
    """
    n = len(columns)
    lowest_one: List[Optional[int]] = [None] * (n + 1)

    groups: Dict[int, List[int]] = {}
    for j, col in enumerate(columns, start=1):
        if col:
            groups.setdefault(len(col), []).append(j)

    adds = 0
    cleared = 0
    for size in sorted(groups, reverse=True):
        for j in groups[size]:
            if not columns[j - 1]:
                continue
            adds += _eliminate(columns, j, lowest_one)
            low = pivot(columns[j - 1])
            if low is not None and columns[low - 1]:
                # Clearing: column `low` is paired as a birth
                columns[low - 1].clear()
                cleared += 1
    logger.debug("Twist reduction: %d columns, %d additions, %d cleared", n, adds, cleared)
    return columns


_REDUCERS = {
    Reduction.STANDARD: standard_reduction,
    Reduction.TWIST: twist_reduction,
}


def reduce_columns(
    columns: List[Column],
    reduction: Union[str, Reduction] = Reduction.TWIST,
    *,
    copy: bool = True,
) -> List[Column]:
    """
    Reduce a boundary matrix.

    Args:
        columns: Boundary columns (1-based row ids)
        reduction: Strategy or its name
        copy: Reduce a deep copy and leave the input untouched

    Returns:
        Reduced columns
    """
    work = [set(c) for c in columns] if copy else columns
    return _REDUCERS[Reduction.parse(reduction)](work)


def pivots(columns: List[Column]) -> Dict[int, int]:
    """Map pivot row -> column id over the nonempty columns."""
    out: Dict[int, int] = {}
    for j, col in enumerate(columns, start=1):
        if col:
            out[max(col)] = j
    return out
