"""
Tests for the persistent homology interface and the pipeline entry point.
"""

import math

import numpy as np
import pytest

from pershom.filtration.boundary import build_boundary_matrix
from pershom.filtration.filtration import Filtration
from pershom.homology.persistent import PersistentHomology
from pershom.reduction.pairs import Interval, PersistencePair
from pershom.reduction.reducers import Reduction
from pershom.solver import run_persistence
from pershom.topology.rips import vietoris_rips
from pershom.topology.simplex import Simplex


@pytest.fixture
def edge():
    flt = Filtration()
    flt.insert(Simplex((0,)), 1)
    flt.insert(Simplex((1,)), 1)
    flt.insert(Simplex((0, 1)), 2)
    return flt


@pytest.fixture
def triangle():
    flt = Filtration()
    for v in range(3):
        flt.insert(Simplex((v,)), v + 1)
    flt.insert(Simplex((0, 1)), 4)
    flt.insert(Simplex((1, 2)), 5)
    flt.insert(Simplex((0, 2)), 6)
    flt.insert(Simplex((0, 1, 2)), 7)
    return flt


class TestPersistentHomology:
    def test_edge_scenario(self, edge):
        ph = PersistentHomology(edge, reduction=Reduction.STANDARD)

        assert ph.boundary.columns == [set(), set(), {1, 2}]
        assert ph.reduced_matrix == [set(), set(), {1, 2}]
        assert ph.pairs() == [PersistencePair(2, 3), PersistencePair(1, math.inf)]
        assert ph.group(0) == 1
        assert ph.group(1) == 0

    def test_iteration(self, triangle):
        ph = PersistentHomology(triangle)
        assert len(ph) == 3
        assert list(ph) == [(0, 1), (1, 0), (2, 0)]
        # Iterating again reuses the cached matrices
        assert dict(ph) == {0: 1, 1: 0, 2: 0}

    def test_lazy_caches(self, triangle):
        ph = PersistentHomology(triangle)
        assert ph._boundary is None
        assert ph._R is None

        ph.group(0)
        bm, R = ph.boundary, ph.reduced_matrix
        ph.group(1)
        assert ph.boundary is bm
        assert ph.reduced_matrix is R

    def test_original_matrix_untouched(self, triangle):
        ph = PersistentHomology(triangle)
        list(ph)
        assert ph.boundary.columns == build_boundary_matrix(triangle).columns
        assert ph.reduced_matrix[5] == set()

    def test_reduced(self, triangle):
        ph = PersistentHomology(triangle, reduced=True)
        assert dict(ph) == {0: 0, 1: 0, 2: 0}

    def test_intervals(self, triangle):
        ph = PersistentHomology(triangle, reduction="standard")
        assert ph.intervals()[1] == [Interval(6, 7)]

    def test_empty_filtration(self):
        ph = PersistentHomology(Filtration())
        assert len(ph) == 0
        assert list(ph) == []

    def test_repr(self, triangle):
        assert "twist" in repr(PersistentHomology(triangle))

    def test_strategies_agree(self):
        rng = np.random.default_rng(42)
        cplx, w = vietoris_rips(rng.random((16, 2)), 0.4, expand=True)
        flt = Filtration.from_weights(cplx, w)

        std = PersistentHomology(flt, reduction="standard")
        tw = PersistentHomology(flt, reduction="twist")
        assert list(std) == list(tw)
        assert set(std.pairs()) == set(tw.pairs())


class TestRunPersistence:
    def test_triangle(self, triangle):
        result = run_persistence(triangle, reduction="standard")

        assert result.betti == {0: 1, 1: 0, 2: 0}
        assert result.intervals[1] == [Interval(6, 7)]
        assert len(result.boundary) == 7
        assert result.reduced_columns[5] == set()
        assert PersistencePair(1, math.inf) in result.pairs

    def test_circle(self):
        t = np.linspace(0, 2 * np.pi, 12, endpoint=False)
        X = np.column_stack([np.cos(t), np.sin(t)])
        cplx, w = vietoris_rips(X, 0.6, expand=True)

        result = run_persistence(Filtration.from_weights(cplx, w))
        assert result.betti == {0: 1, 1: 1}

    def test_unknown_reduction(self, triangle):
        with pytest.raises(ValueError):
            run_persistence(triangle, reduction="gauss")
