"""
pershom/topology/complex.py

Simplicial complex store.

A simplicial complex keeps, per dimension, its cells in insertion order.
A cell is addressed by (dimension, index) where index is its 0-based
position among the cells of that dimension.
"""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Optional, Tuple, Type

import networkx as nx

from pershom.errors import TypeMismatch
from pershom.topology.simplex import Simplex


class SimplicialComplex:
    """
    Simplicial complex with face-closed insertion.

    Maintains:
    - Cells grouped by dimension, in insertion order
    - Reverse lookup from cell to its index within its dimension
    """

    def __init__(self, vertex_type: type = int):
        self.vertex_type = vertex_type
        self._cells: Dict[int, List[Simplex]] = {}
        self._index: Dict[Simplex, int] = {}

    def cell_type(self) -> Type[Simplex]:
        """Type of cell this complex accepts."""
        return Simplex

    def dimension(self) -> int:
        """Highest dimension holding a cell, -1 for the empty complex."""
        dims = [d for d, cs in self._cells.items() if cs]
        return max(dims) if dims else -1

    def size(self, dim: int) -> int:
        """Number of cells of the given dimension."""
        return len(self._cells.get(dim, ()))

    def sizes(self) -> Tuple[int, ...]:
        """Cell counts for dimensions 0..dimension()."""
        return tuple(self.size(d) for d in range(self.dimension() + 1))

    def cells(self, dim: int) -> Tuple[Simplex, ...]:
        """Cells of the given dimension in index order."""
        return tuple(self._cells.get(dim, ()))

    def cell_at(self, index: int, dim: int) -> Simplex:
        """Get the cell stored at (dim, index)."""
        return self._cells[dim][index]

    def index_of(self, cell: Simplex) -> int:
        """Get the index of a cell within its dimension."""
        return self._index[cell]

    def faces_of(self, cell: Simplex) -> List[Simplex]:
        """Faces of a cell; every face must belong to the complex."""
        out = []
        for face in cell.faces():
            if face not in self._index:
                raise KeyError(f"Face {face} of {cell} not in complex")
            out.append(face)
        return out

    def insert(self, cell: Simplex, recursive: bool = False) -> List[Simplex]:
        """
        Insert a cell.

        Args:
            cell: Simplex to insert
            recursive: Also insert any missing faces, transitively

        Returns:
            Newly inserted cells, faces before the cells they bound.
            Empty if the cell was already present.
        """
        self._check_type(cell)
        if cell in self._index:
            return []

        inserted: List[Simplex] = []
        for face in cell.faces():
            if face in self._index:
                continue
            if not recursive:
                raise ValueError(f"Cannot insert {cell}: face {face} is missing")
            inserted.extend(self.insert(face, recursive=True))

        cs = self._cells.setdefault(cell.dim, [])
        self._index[cell] = len(cs)
        cs.append(cell)
        inserted.append(cell)
        return inserted

    def _check_type(self, cell) -> None:
        if not isinstance(cell, self.cell_type()):
            raise TypeMismatch(f"{self!r} does not accept {type(cell).__name__}")
        for v in cell.values:
            if not isinstance(v, self.vertex_type):
                raise TypeMismatch(
                    f"{self!r} does not accept vertex {v!r} of type {type(v).__name__}"
                )

    def copy(self) -> "SimplicialComplex":
        other = SimplicialComplex(self.vertex_type)
        other._cells = {d: list(cs) for d, cs in self._cells.items()}
        other._index = dict(self._index)
        return other

    def __contains__(self, cell) -> bool:
        return cell in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"SimplicialComplex(dim={self.dimension()}, sizes={self.sizes()})"


def flag_complex(
    graph: nx.Graph,
    max_dim: Optional[int] = None,
    vertex_type: type = int,
) -> SimplicialComplex:
    """
    Build the clique (flag) complex of a graph.

    Args:
        graph: NetworkX graph; nodes become vertices, edges 1-simplices
        max_dim: Highest simplex dimension to include (None: all cliques)
        vertex_type: Vertex label type accepted by the complex

    Returns:
        SimplicialComplex with every clique of size <= max_dim + 1
    """
    cplx = SimplicialComplex(vertex_type)
    for v in sorted(graph.nodes()):
        cplx.insert(Simplex((v,)))

    # enumerate_all_cliques yields cliques by nondecreasing size
    cliques: List[Tuple] = []
    for clique in nx.enumerate_all_cliques(graph):
        if len(clique) < 2:
            continue
        if max_dim is not None and len(clique) > max_dim + 1:
            break
        cliques.append(tuple(sorted(clique)))

    for clique in sorted(cliques, key=lambda c: (len(c), c)):
        cplx.insert(Simplex(clique))
    return cplx


def complex_from_simplices(simplices, vertex_type: type = int) -> SimplicialComplex:
    """Build a complex holding the given simplices and all of their faces."""
    cplx = SimplicialComplex(vertex_type)
    for s in simplices:
        s = s if isinstance(s, Simplex) else Simplex(tuple(s))
        for k in range(1, len(s) + 1):
            for face in combinations(s.values, k):
                cplx.insert(Simplex(face), recursive=True)
    return cplx
