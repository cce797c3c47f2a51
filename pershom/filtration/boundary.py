"""
pershom/filtration/boundary.py

Combined boundary matrix of a filtration.

Columns and rows are indexed by the filtration's total order. Column j holds
the row ids of the faces of the cell placed at column j, so the matrix is
upper triangular whenever the filtration is monotone. Entries are over GF(2),
so a column is just a set of row ids.

For reduced homology, column/row 1 stands for a virtual cone vertex that
bounds every vertex of the complex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Set

import numpy as np
import scipy.sparse as sp

from pershom.core.order import TotalOrder
from pershom.errors import InvariantViolation
from pershom.filtration.filtration import Filtration

logger = logging.getLogger(__name__)

Column = Set[int]


def simplex_dimension(col) -> int:
    """Dimension of the cell behind an unreduced column (empty: vertex)."""
    return len(col) - 1 if col else 0


@dataclass
class BoundaryMatrix:
    """
    Sparse boundary operator in filtration order.

    Attributes:
        columns: columns[j - 1] is the row set of column id j
        order: Total order map of the filtration's cells
        reduced: Whether column/row 1 is the augmentation vertex
    """
    columns: List[Column]
    order: TotalOrder
    reduced: bool = False

    def column(self, j: int) -> Column:
        """Row set of column id j (1-based)."""
        return self.columns[j - 1]

    def copy_columns(self) -> List[Column]:
        """Deep copy of the columns, safe to reduce in place."""
        return [set(c) for c in self.columns]

    def dimensions(self) -> np.ndarray:
        """Simplex dimension behind every column."""
        return np.array([simplex_dimension(c) for c in self.columns], dtype=np.int64)

    def to_sparse(self) -> sp.csc_matrix:
        """
        Export as a 0-based GF(2) CSC matrix.

        Row/column id j becomes index j - 1.
        """
        n = len(self.columns)
        rows: List[int] = []
        cols: List[int] = []
        for j, col in enumerate(self.columns):
            for i in col:
                rows.append(i - 1)
                cols.append(j)
        data = np.ones(len(rows), dtype=np.int8)
        return sp.csc_matrix((data, (rows, cols)), shape=(n, n))

    def __len__(self) -> int:
        return len(self.columns)


def build_boundary_matrix(flt: Filtration, reduced: bool = False) -> BoundaryMatrix:
    """
    Generate the combined boundary matrix of a filtration.

    Args:
        flt: Filtration
        reduced: Reserve column/row 1 for the augmentation vertex

    Returns:
        BoundaryMatrix with n (or n + 1 if reduced) columns

    Raises:
        InvariantViolation: if a cell's face is not placed before the cell
    """
    offset = 1 if reduced else 0
    order = TotalOrder.build(flt.entries(), offset=offset)

    columns: List[Column] = [set() for _ in range(len(order) + offset)]
    cplx = flt.complex
    for k, e in enumerate(order.entries):
        col = k + 1 + offset
        if e.dim == 0:
            if reduced:
                columns[col - 1].add(1)
            continue

        cell = cplx.cell_at(e.index, e.dim)
        for face in cplx.faces_of(cell):
            key = (e.dim - 1, cplx.index_of(face))
            row = order.column_of.get(key)
            if row is None or row >= col:
                raise InvariantViolation(
                    f"Face {face} of {cell} (value {e.value!r}) has no column before {col}; "
                    "filtration is not monotone"
                )
            columns[col - 1].add(row)

    logger.debug("Boundary matrix: %d columns (reduced=%s)", len(columns), reduced)
    return BoundaryMatrix(columns=columns, order=order, reduced=reduced)
