"""
pershom/topology/simplex.py

Abstract simplex with canonical vertex order.

A k-simplex is determined by its k+1 distinct vertex labels. Labels are kept
sorted so that two simplices over the same vertex set compare equal.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Any, List, Tuple

Vertex = Any


@dataclass(frozen=True)
class Simplex:
    """
    Simplex given by its defining values (vertex labels).

    Attributes:
        values: Canonical sorted vertex labels
    """
    values: Tuple[Vertex, ...]

    def __post_init__(self):
        # Ensure values are sorted for canonical representation
        vals = tuple(sorted(self.values))
        if len(set(vals)) != len(vals):
            raise ValueError(f"Simplex has repeated vertices: {self.values}")
        if not vals:
            raise ValueError("Simplex needs at least one vertex")
        if vals != self.values:
            object.__setattr__(self, "values", vals)

    @property
    def dim(self) -> int:
        """Dimension: number of vertices minus one."""
        return len(self.values) - 1

    def faces(self) -> List["Simplex"]:
        """Codimension-1 faces; a vertex has none."""
        if self.dim == 0:
            return []
        return [Simplex(f) for f in combinations(self.values, self.dim)]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def __repr__(self) -> str:
        return f"Simplex{self.values}"
