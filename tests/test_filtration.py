"""
Tests for filtrations.
"""

import pytest

from pershom.errors import InvariantViolation, TypeMismatch
from pershom.filtration.filtration import Filtration
from pershom.topology.complex import complex_from_simplices
from pershom.topology.simplex import Simplex


@pytest.fixture
def triangle_complex():
    # Edges: 0 -> (0, 1), 1 -> (0, 2), 2 -> (1, 2)
    return complex_from_simplices([(0, 1, 2)])


class TestConstruction:
    def test_default_ordering(self, triangle_complex):
        flt = Filtration.from_complex(triangle_complex)

        assert len(flt) == 7
        assert flt.values() == list(range(1, 8))
        assert flt.index[1] == [(0, 0)]
        assert flt.index[4] == [(1, 0)]
        assert flt.index[7] == [(2, 0)]

    def test_from_weights(self, triangle_complex):
        w = {0: [0, 0, 0], 1: [1, 2, 3], 2: [3]}
        flt = Filtration.from_weights(triangle_complex, w)

        assert flt.values() == [0, 1, 2, 3]
        assert flt.index[0] == [(0, 0), (0, 1), (0, 2)]
        assert flt.index[3] == [(1, 2), (2, 0)]

    def test_from_weights_wrong_length(self, triangle_complex):
        w = {0: [0, 0], 1: [1, 2, 3], 2: [3]}
        with pytest.raises(ValueError):
            Filtration.from_weights(triangle_complex, w)

    def test_entries_sorted_by_dimension_within_value(self):
        flt = Filtration()
        flt.insert(Simplex((0, 1)), 1.0, recursive=True)

        # Recursive insertion puts faces first in the bucket
        assert flt.index[1.0] == [(0, 0), (0, 1), (1, 0)]
        assert list(flt.entries()) == [(1.0, 0, 0), (1.0, 0, 1), (1.0, 1, 0)]


class TestInsert:
    def test_insert_appends_to_bucket(self):
        flt = Filtration()
        flt.insert(Simplex((0,)), 1)
        flt.insert(Simplex((1,)), 1)
        flt.insert(Simplex((0, 1)), 2)

        assert flt.index == {1: [(0, 0), (0, 1)], 2: [(1, 0)]}
        assert flt.dimension() == 1

    def test_insert_returns_filtration(self):
        flt = Filtration()
        assert flt.insert(Simplex((0,)), 0.5) is flt

    def test_type_mismatch(self):
        flt = Filtration()
        with pytest.raises(TypeMismatch):
            flt.insert((0, 1), 1.0)

    def test_vertex_type_mismatch(self):
        flt = Filtration()
        with pytest.raises(TypeMismatch):
            flt.insert(Simplex(("a",)), 1.0)

    def test_missing_face_without_recursive(self):
        flt = Filtration()
        with pytest.raises(ValueError):
            flt.insert(Simplex((0, 1)), 1.0)


class TestIteration:
    def test_snapshots_accumulate(self, triangle_complex):
        w = {0: [0, 0, 0], 1: [1, 2, 3], 2: [3]}
        flt = Filtration.from_weights(triangle_complex, w)

        steps = list(flt)
        assert [v for v, _ in steps] == [0, 1, 2, 3]
        assert [len(c) for _, c in steps] == [3, 4, 5, 7]

    def test_snapshots_are_independent(self, triangle_complex):
        flt = Filtration.from_complex(triangle_complex)
        first = next(iter(flt))[1]
        assert len(first) == 1

        list(flt)
        assert len(first) == 1

    def test_restartable(self, triangle_complex):
        flt = Filtration.from_complex(triangle_complex)
        a = [len(c) for _, c in flt]
        b = [len(c) for _, c in flt]
        assert a == b == list(range(1, 8))

    def test_non_monotone_raises(self):
        flt = Filtration()
        flt.insert(Simplex((0,)), 5)
        flt.insert(Simplex((1,)), 5)
        flt.insert(Simplex((0, 1)), 1)

        with pytest.raises(InvariantViolation):
            list(flt)
