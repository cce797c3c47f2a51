"""
Reduction module: GF(2) column reduction and persistence pairs.
"""

from pershom.reduction.reducers import (
    Reduction,
    pivot,
    pivots,
    standard_reduction,
    twist_reduction,
    reduce_columns,
)
from pershom.reduction.pairs import (
    PersistencePair,
    Interval,
    generate_pairs,
    intervals,
    persistence_pairs,
    persistence_intervals,
)

__all__ = [
    "Reduction",
    "pivot",
    "pivots",
    "standard_reduction",
    "twist_reduction",
    "reduce_columns",
    "PersistencePair",
    "Interval",
    "generate_pairs",
    "intervals",
    "persistence_pairs",
    "persistence_intervals",
]
