"""
pershom/filtration/filtration.py

Filtration of a simplicial complex.

A filtration assigns every cell a value (its birth time) so that the complex
is built as a nested sequence

    0 = K_0 <= K_1 <= ... <= K_m = K

by adding, at each distinct value, all cells born at that value. Within one
value cells are ordered by ascending dimension.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from pershom.errors import InvariantViolation, TypeMismatch
from pershom.topology.complex import SimplicialComplex
from pershom.topology.simplex import Simplex

logger = logging.getLogger(__name__)


class Filtration:
    """
    Filtered simplicial complex.

    Maintains:
    - The underlying complex
    - index: filtration value -> list of (dimension, cell index) born at it
    """

    def __init__(
        self,
        cplx: Optional[SimplicialComplex] = None,
        index: Optional[Dict[Any, List[Tuple[int, int]]]] = None,
    ):
        self.complex = cplx if cplx is not None else SimplicialComplex()
        self.index: Dict[Any, List[Tuple[int, int]]] = index if index is not None else {}

    @classmethod
    def from_complex(cls, cplx: SimplicialComplex) -> "Filtration":
        """Default filtration: values 1, 2, 3, ... by ascending dimension, then index."""
        index: Dict[Any, List[Tuple[int, int]]] = {}
        i = 1
        for d in range(cplx.dimension() + 1):
            for ci in range(cplx.size(d)):
                index[i] = [(d, ci)]
                i += 1
        return cls(cplx, index)

    @classmethod
    def from_weights(
        cls,
        cplx: SimplicialComplex,
        weights: Mapping[int, Sequence[Any]],
    ) -> "Filtration":
        """
        Filtration from per-dimension cell weights.

        Args:
            cplx: Simplicial complex
            weights: weights[d][i] is the filtration value of cell (d, i)

        Returns:
            Filtration grouping cells by their weight
        """
        index: Dict[Any, List[Tuple[int, int]]] = {}
        for d in range(cplx.dimension() + 1):
            w = weights[d]
            if len(w) != cplx.size(d):
                raise ValueError(
                    f"Expected {cplx.size(d)} weights for dimension {d}, got {len(w)}"
                )
            for ci in range(cplx.size(d)):
                index.setdefault(w[ci], []).append((d, ci))
        logger.debug("Weighted filtration: %d cells over %d values", len(cplx), len(index))
        return cls(cplx, index)

    def insert(self, cell: Simplex, value: Any, recursive: bool = False) -> "Filtration":
        """
        Add a cell (and, if recursive, its missing faces) born at a value.

        Raises:
            TypeMismatch: if the complex does not accept the cell
        """
        if not isinstance(cell, self.complex.cell_type()):
            raise TypeMismatch(f"{self.complex!r} does not accept {type(cell).__name__}")
        inserted = self.complex.insert(cell, recursive=recursive)
        bucket = self.index.setdefault(value, [])
        for c in inserted:
            bucket.append((c.dim, self.complex.index_of(c)))
        return self

    def values(self) -> List[Any]:
        """Distinct filtration values in ascending order."""
        return sorted(self.index.keys())

    def entries(self) -> Iterator[Tuple[Any, int, int]]:
        """
        Cells in filtration order as (value, dimension, index).

        Same-dimension cells sharing a value keep their insertion order;
        callers should not rely on that order.
        """
        for v in self.values():
            for d, ci in sorted(self.index[v], key=lambda e: e[0]):
                yield v, d, ci

    def dimension(self) -> int:
        return self.complex.dimension()

    def __iter__(self) -> Iterator[Tuple[Any, SimplicialComplex]]:
        """
        Yield (value, snapshot) per distinct value, ascending.

        Each snapshot is a separate complex holding every cell born at or
        before that value.
        """
        acc = SimplicialComplex(self.complex.vertex_type)
        for v in self.values():
            for d, ci in sorted(self.index[v], key=lambda e: e[0]):
                cell = self.complex.cell_at(ci, d)
                for face in cell.faces():
                    if face not in acc:
                        raise InvariantViolation(
                            f"{cell} at value {v!r} is born before its face {face}"
                        )
                acc.insert(cell)
            yield v, acc.copy()

    def __len__(self) -> int:
        return len(self.index)

    def __repr__(self) -> str:
        return f"Filtration({self.complex!r})"
