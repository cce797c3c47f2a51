"""
Filtration module: Filtrations, boundary matrices, and their text formats.
"""

from pershom.filtration.filtration import Filtration
from pershom.filtration.boundary import BoundaryMatrix, build_boundary_matrix, simplex_dimension
from pershom.filtration.serialization import (
    write_filtration,
    read_filtration,
    dumps_filtration,
    loads_filtration,
    write_boundary_matrix,
)

__all__ = [
    "Filtration",
    "BoundaryMatrix",
    "build_boundary_matrix",
    "simplex_dimension",
    "write_filtration",
    "read_filtration",
    "dumps_filtration",
    "loads_filtration",
    "write_boundary_matrix",
]
