"""
Topology module: Simplices, simplicial complexes, and Rips construction.
"""

from pershom.topology.simplex import Simplex
from pershom.topology.complex import SimplicialComplex, flag_complex, complex_from_simplices
from pershom.topology.rips import neighborhood_graph, vietoris_rips

__all__ = [
    "Simplex",
    "SimplicialComplex",
    "flag_complex",
    "complex_from_simplices",
    "neighborhood_graph",
    "vietoris_rips",
]
