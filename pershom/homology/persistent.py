"""
pershom/homology/persistent.py

Persistent homology of a filtration.

The boundary matrix and its reduction are computed once, on first use, and
reused by every later query.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from pershom.filtration.boundary import BoundaryMatrix, build_boundary_matrix
from pershom.filtration.filtration import Filtration
from pershom.homology.betti import betti
from pershom.reduction.pairs import Interval, PersistencePair, generate_pairs, intervals
from pershom.reduction.reducers import Reduction, reduce_columns

logger = logging.getLogger(__name__)


class PersistentHomology:
    """
    Persistent homology groups of a filtration.

    Iterating yields (p, beta_p) for p = 0..dim of the complex.
    Not thread-safe.
    """

    def __init__(
        self,
        filtration: Filtration,
        reduction: Union[str, Reduction] = Reduction.TWIST,
        reduced: bool = False,
    ):
        self.filtration = filtration
        self.reduction = Reduction.parse(reduction)
        self.reduced = reduced
        self._boundary: Optional[BoundaryMatrix] = None
        self._R: Optional[List[Set[int]]] = None

    @property
    def boundary(self) -> BoundaryMatrix:
        """Unreduced boundary matrix (built on first access)."""
        if self._boundary is None:
            self._boundary = build_boundary_matrix(self.filtration, reduced=self.reduced)
            logger.info("Built boundary matrix with %d columns", len(self._boundary))
        return self._boundary

    @property
    def reduced_matrix(self) -> List[Set[int]]:
        """Reduced copy of the boundary matrix (computed on first access)."""
        if self._R is None:
            self._R = reduce_columns(self.boundary.columns, self.reduction, copy=True)
            logger.info("Reduced boundary matrix (%s)", self.reduction.value)
        return self._R

    def group(self, p: int) -> int:
        """Betti number of the p-th homology group."""
        return betti(self.boundary.columns, self.reduced_matrix, p)

    def pairs(self) -> List[PersistencePair]:
        return generate_pairs(self.reduced_matrix, reduced=self.reduced)

    def intervals(self, length0: bool = False) -> Dict[int, List[Interval]]:
        return intervals(
            self.boundary.order, self.pairs(), self.filtration.dimension(), length0=length0
        )

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        for p in range(self.filtration.dimension() + 1):
            yield p, self.group(p)

    def __len__(self) -> int:
        return self.filtration.dimension() + 1

    def __repr__(self) -> str:
        return f"PersistentHomology[{self.filtration!r} with {self.reduction.value} reduction]"
