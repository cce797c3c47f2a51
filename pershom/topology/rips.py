"""
pershom/topology/rips.py

Vietoris-Rips complex construction from a point cloud.

The neighborhood graph G_eps = (X, E) has:
- Nodes: point indices
- Edges: pairs of points at distance <= eps
- Edge weights: pairwise distance

With expansion, every clique of G_eps up to max_dim + 1 vertices becomes a
simplex whose filtration weight is its largest edge length.
"""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Tuple

import networkx as nx
import numpy as np
from scipy.spatial.distance import pdist, squareform

from pershom.topology.complex import SimplicialComplex, flag_complex


def neighborhood_graph(points: np.ndarray, eps: float) -> nx.Graph:
    """
    Build the eps-neighborhood graph of a point cloud.

    Args:
        points: Array of shape (n_points, n_features)
        eps: Distance threshold

    Returns:
        NetworkX graph with integer nodes and 'weight' edge attributes
    """
    X = np.atleast_2d(np.asarray(points, dtype=np.float64))
    n = X.shape[0]
    D = squareform(pdist(X)) if n > 1 else np.zeros((n, n))

    g = nx.Graph()
    g.add_nodes_from(range(n))
    rows, cols = np.nonzero(np.triu(D <= eps, k=1))
    for i, j in zip(rows.tolist(), cols.tolist()):
        g.add_edge(i, j, weight=float(D[i, j]))
    return g


def vietoris_rips(
    points: np.ndarray,
    eps: float,
    expand: bool = False,
    max_dim: int = 2,
) -> Tuple[SimplicialComplex, Dict[int, List[float]]]:
    """
    Construct a Vietoris-Rips complex and its per-dimension weights.

    Args:
        points: Array of shape (n_points, n_features), one point per row
        eps: Maximal edge length
        expand: Add higher-dimensional simplices for cliques
        max_dim: Highest simplex dimension when expanding

    Returns:
        (complex, weights) where weights[d][i] is the filtration value of
        the i-th cell of dimension d
    """
    g = neighborhood_graph(points, eps)
    cplx = flag_complex(g, max_dim=max_dim if expand else 1)

    weights: Dict[int, List[float]] = {0: [0.0] * cplx.size(0)}
    for d in range(1, cplx.dimension() + 1):
        w = []
        for s in cplx.cells(d):
            # Weight = longest edge of the simplex
            w.append(max(g[u][v]["weight"] for u, v in combinations(s.values, 2)))
        weights[d] = w
    return cplx, weights
