"""
pershom: Persistent Homology over GF(2)

Persistence intervals and Betti numbers of filtered simplicial complexes.

Key components:
- topology: Simplices, simplicial complexes, and Vietoris-Rips construction
- core: Total order of filtration cells
- filtration: Filtrations, boundary matrices, and their text formats
- reduction: Standard and twist reduction, persistence pairs and intervals
- homology: Betti numbers and the persistent homology interface
"""

__version__ = "1.0.0"
__author__ = "pershom Team"

from pershom.errors import (
    TypeMismatch,
    InvariantViolation,
    DimensionOutOfRange,
    FiltrationParseError,
)
from pershom.topology.simplex import Simplex
from pershom.topology.complex import SimplicialComplex, flag_complex
from pershom.topology.rips import vietoris_rips
from pershom.core.order import TotalOrder
from pershom.filtration.filtration import Filtration
from pershom.filtration.boundary import BoundaryMatrix, build_boundary_matrix
from pershom.filtration.serialization import (
    read_filtration,
    write_filtration,
    write_boundary_matrix,
)
from pershom.reduction.reducers import Reduction, reduce_columns
from pershom.reduction.pairs import (
    Interval,
    PersistencePair,
    generate_pairs,
    intervals,
    persistence_intervals,
)
from pershom.homology.betti import betti
from pershom.homology.persistent import PersistentHomology
from pershom.solver import run_persistence, PersistenceResult

__all__ = [
    # Errors
    "TypeMismatch",
    "InvariantViolation",
    "DimensionOutOfRange",
    "FiltrationParseError",
    # Topology
    "Simplex",
    "SimplicialComplex",
    "flag_complex",
    "vietoris_rips",
    # Filtration
    "TotalOrder",
    "Filtration",
    "BoundaryMatrix",
    "build_boundary_matrix",
    "read_filtration",
    "write_filtration",
    "write_boundary_matrix",
    # Reduction
    "Reduction",
    "reduce_columns",
    "Interval",
    "PersistencePair",
    "generate_pairs",
    "intervals",
    "persistence_intervals",
    # Homology
    "betti",
    "PersistentHomology",
    "run_persistence",
    "PersistenceResult",
]
