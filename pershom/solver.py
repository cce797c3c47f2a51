"""
pershom/solver.py

High-level interface for persistence computations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Set, Union

from pershom.filtration.boundary import BoundaryMatrix
from pershom.filtration.filtration import Filtration
from pershom.homology.persistent import PersistentHomology
from pershom.reduction.pairs import Interval, PersistencePair
from pershom.reduction.reducers import Reduction


@dataclass
class PersistenceResult:
    """Result from running the persistence pipeline."""
    boundary: BoundaryMatrix
    reduced_columns: List[Set[int]]
    pairs: List[PersistencePair]
    intervals: Dict[int, List[Interval]]
    betti: Dict[int, int]


def run_persistence(
    filtration: Filtration,
    reduction: Union[str, Reduction] = "twist",
    reduced: bool = False,
    length0: bool = False,
) -> PersistenceResult:
    """
    Run the full persistence pipeline on a filtration.

    Args:
        filtration: Filtered complex
        reduction: "standard" or "twist"
        reduced: Compute reduced homology
        length0: Keep zero-length intervals

    Returns:
        PersistenceResult with matrices, pairs, intervals, and Betti numbers

    Example:
        >>> flt = Filtration()
        >>> flt.insert(Simplex((0, 1)), 1.0, recursive=True)
        >>> result = run_persistence(flt)
        >>> result.betti
        {0: 1, 1: 0}
    """
    ph = PersistentHomology(filtration, reduction=reduction, reduced=reduced)
    betti = dict(ph)
    return PersistenceResult(
        boundary=ph.boundary,
        reduced_columns=ph.reduced_matrix,
        pairs=ph.pairs(),
        intervals=ph.intervals(length0=length0),
        betti=betti,
    )
