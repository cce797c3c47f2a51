"""
Tests for persistence pairs and intervals.
"""

import math

import pytest

from pershom.filtration.boundary import build_boundary_matrix
from pershom.filtration.filtration import Filtration
from pershom.reduction.pairs import (
    Interval,
    PersistencePair,
    generate_pairs,
    intervals,
    persistence_intervals,
    persistence_pairs,
)
from pershom.reduction.reducers import reduce_columns
from pershom.topology.simplex import Simplex


def edge_filtration(edge_value=2):
    flt = Filtration()
    flt.insert(Simplex((0,)), 1)
    flt.insert(Simplex((1,)), 1)
    flt.insert(Simplex((0, 1)), edge_value)
    return flt


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


class TestGeneratePairs:
    def test_edge(self):
        pairs = generate_pairs([set(), set(), {1, 2}])
        assert pairs == [PersistencePair(2, 3), PersistencePair(1, math.inf)]
        assert pairs[1].essential
        assert not pairs[0].essential

    def test_reduced_offset(self):
        R = reduce_columns([set(), {1}, {1}, {2, 3}], "standard")
        pairs = generate_pairs(R, reduced=True)

        # (0, 1) pairs the augmentation with the first vertex
        assert pairs == [PersistencePair(0, 1), PersistencePair(2, 3)]

    def test_invalid_column_discarded(self):
        # Pivot below the diagonal does not give a pair
        assert generate_pairs([{2}, set()]) == [PersistencePair(2, math.inf)]

    def test_triangle(self):
        pairs, R = persistence_pairs(triangle_filtration(), "standard")
        assert set(pairs) == {
            PersistencePair(2, 4),
            PersistencePair(3, 5),
            PersistencePair(6, 7),
            PersistencePair(1, math.inf),
        }
        assert R[5] == set()


class TestIntervals:
    def test_edge(self):
        flt = edge_filtration()
        bm = build_boundary_matrix(flt)
        ps = generate_pairs(reduce_columns(bm.columns))

        assert intervals(bm.order, ps, flt.dimension()) == {
            0: [Interval(1, 2), Interval(1, math.inf)],
        }

    def test_zero_length_dropped_by_default(self):
        flt = edge_filtration(edge_value=1)
        assert persistence_intervals(flt) == {0: [Interval(1, math.inf)]}

    def test_zero_length_kept(self):
        flt = edge_filtration(edge_value=1)
        assert persistence_intervals(flt, length0=True) == {
            0: [Interval(1, 1), Interval(1, math.inf)],
        }

    def test_filled_triangle(self):
        ints = persistence_intervals(triangle_filtration())
        assert ints == {
            0: [Interval(2, 4), Interval(3, 5), Interval(1, math.inf)],
            1: [Interval(6, 7)],
        }

    def test_top_dimension_excluded(self):
        # The hollow triangle is 1-dimensional, so its 1-cycle is not reported
        ints = persistence_intervals(triangle_filtration(filled=False))
        assert set(ints) == {0}
        assert len(ints[0]) == 3

    def test_augmentation_skipped(self):
        ints = persistence_intervals(triangle_filtration(), reduced=True)
        assert ints == {
            0: [Interval(2, 4), Interval(3, 5)],
            1: [Interval(6, 7)],
        }

    @pytest.mark.parametrize("reduction", ["standard", "twist"])
    def test_reduction_choice(self, reduction):
        ints = persistence_intervals(triangle_filtration(), reduction=reduction)
        assert ints[1] == [Interval(6, 7)]

    def test_interval_str(self):
        assert str(Interval(1, 2)) == "[1,2)"
        assert str(Interval(0.5, math.inf)) == "[0.5,inf)"
        assert Interval(0.5, math.inf).essential
