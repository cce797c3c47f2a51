"""
Tests for Betti numbers.
"""

import numpy as np
import pytest

from pershom.errors import DimensionOutOfRange
from pershom.filtration.boundary import build_boundary_matrix
from pershom.filtration.filtration import Filtration
from pershom.homology.betti import betti
from pershom.reduction.pairs import persistence_intervals
from pershom.reduction.reducers import reduce_columns
from pershom.topology.rips import vietoris_rips
from pershom.topology.simplex import Simplex


def triangle_filtration(filled=True):
    flt = Filtration()
    for v in range(3):
        flt.insert(Simplex((v,)), v + 1)
    flt.insert(Simplex((0, 1)), 4)
    flt.insert(Simplex((1, 2)), 5)
    flt.insert(Simplex((0, 2)), 6)
    if filled:
        flt.insert(Simplex((0, 1, 2)), 7)
    return flt


def bettis(flt, reduced=False, reduction="twist"):
    bm = build_boundary_matrix(flt, reduced=reduced)
    R = reduce_columns(bm.columns, reduction)
    return [betti(bm.columns, R, p) for p in range(flt.dimension() + 1)]


class TestBetti:
    def test_edge(self):
        original = [set(), set(), {1, 2}]
        R = reduce_columns(original, "standard")

        assert betti(original, R, 0) == 1
        assert betti(original, R, 1) == 0

    def test_out_of_range(self):
        original = [set(), set(), {1, 2}]
        R = reduce_columns(original)

        with pytest.raises(DimensionOutOfRange):
            betti(original, R, 2)
        with pytest.raises(DimensionOutOfRange):
            betti(original, R, -1)

    def test_empty_matrix(self):
        with pytest.raises(DimensionOutOfRange):
            betti([], [], 0)

    @pytest.mark.parametrize("reduction", ["standard", "twist"])
    def test_filled_triangle(self, reduction):
        assert bettis(triangle_filtration(), reduction=reduction) == [1, 0, 0]

    def test_hollow_triangle(self):
        assert bettis(triangle_filtration(filled=False)) == [1, 1]

    def test_filled_triangle_reduced(self):
        # Reduced homology of a contractible complex
        assert bettis(triangle_filtration(), reduced=True) == [0, 0, 0]

    def test_hollow_triangle_reduced(self):
        assert bettis(triangle_filtration(filled=False), reduced=True) == [0, 1]

    def test_two_components(self):
        flt = Filtration()
        flt.insert(Simplex((0, 1)), 1.0, recursive=True)
        flt.insert(Simplex((2, 3)), 2.0, recursive=True)
        assert bettis(flt) == [2, 0]
        assert bettis(flt, reduced=True) == [1, 0]


class TestEssentialConsistency:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_essential_intervals_match_betti(self, seed):
        rng = np.random.default_rng(seed)
        cplx, w = vietoris_rips(rng.random((14, 2)), 0.4, expand=True)
        flt = Filtration.from_weights(cplx, w)

        ints = persistence_intervals(flt)
        b = bettis(flt)
        for p in range(flt.dimension()):
            essential = [i for i in ints.get(p, []) if i.essential]
            assert len(essential) == b[p]

    def test_hollow_triangle(self):
        flt = triangle_filtration(filled=False)
        ints = persistence_intervals(flt)
        assert sum(i.essential for i in ints[0]) == bettis(flt)[0]
