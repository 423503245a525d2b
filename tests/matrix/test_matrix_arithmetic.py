"""
Tests for Matrix elementwise arithmetic: in-place add/sub/scale/hadamard,
row scaling by a vector, and the +, -, * (scalar) operators.
"""

from fractions import Fraction

import pytest

from densemat import Matrix, Vector
from densemat.core.exceptions import DimensionError


class TestAddSub:

    def test_operators(self):
        a = Matrix.zeros(3, 3, dtype=int)
        b = Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
        d = Matrix(3, 3, [8, 7, 6, 5, 4, 3, 2, 1, 0])
        assert a + b == b
        f = d + b
        assert f == Matrix(3, 3, [9] * 9)
        assert f - d == b

    def test_operators_do_not_mutate(self, a2, b2):
        a2 + b2
        a2 - b2
        assert a2 == Matrix(2, 2, [1, 2, 3, 4])
        assert b2 == Matrix(2, 2, [2, 0, 1, 2])

    def test_add_in_place(self):
        b = Matrix(3, 3, [1, 2, 3, 4, 5, 6, 7, 8, 9])
        c = Matrix(3, 3, [8, 7, 6, 5, 4, 3, 2, 1, 0])
        assert b.add(c) is None
        assert b == Matrix(3, 3, [9] * 9)

    def test_sub_in_place(self, a2):
        a2.sub(Matrix(2, 2, [1, 1, 1, 1]))
        assert a2.tolist() == [[0, 1], [2, 3]]

    def test_augmented_assignment(self, a2, b2):
        ref = a2
        a2 += b2
        assert a2 is ref
        assert a2.tolist() == [[3, 2], [4, 6]]
        a2 -= b2
        assert a2.tolist() == [[1, 2], [3, 4]]

    def test_round_trip(self, rng):
        a = Matrix(4, 3, [float(x) for x in rng.integers(-50, 50, 12)])
        b = Matrix(4, 3, [float(x) for x in rng.integers(-50, 50, 12)])
        assert (a + b) - b == a

    @pytest.mark.parametrize("op", ["add", "sub"])
    def test_in_place_shape_mismatch_leaves_self(self, op):
        m = Matrix(2, 2, [1, 2, 3, 4])
        with pytest.raises(DimensionError, match=f"Matrix.{op}: shape mismatch"):
            getattr(m, op)(Matrix.zeros(2, 3, dtype=int))
        assert m.tolist() == [[1, 2], [3, 4]]

    def test_operator_shape_mismatch(self):
        with pytest.raises(DimensionError):
            Matrix.zeros(2, 2) + Matrix.zeros(3, 2)
        with pytest.raises(DimensionError):
            Matrix.zeros(2, 2) - Matrix.zeros(2, 1)

    def test_same_storage_length_different_shape_rejected(self):
        with pytest.raises(DimensionError):
            Matrix.zeros(2, 3).add(Matrix.zeros(3, 2))

    def test_add_non_matrix(self):
        with pytest.raises(TypeError):
            Matrix.zeros(1, 1) + 1


class TestScalar:

    def test_scale_in_place(self, seq3x3):
        seq3x3.scale(2)
        assert seq3x3 == Matrix(3, 3, [2, 4, 6, 8, 10, 12, 14, 16, 18])

    def test_scalar_operator_returns_new(self, seq3x3):
        c = seq3x3 * 2
        assert c == Matrix(3, 3, [2, 4, 6, 8, 10, 12, 14, 16, 18])
        assert seq3x3[0, 0] == 1

    def test_scale_by_one_is_noop(self, seq3x3):
        assert seq3x3 * 1 == seq3x3

    def test_scale_by_zero_is_zero_matrix(self, seq3x3):
        assert seq3x3 * 0 == Matrix.zeros(3, 3, dtype=int)

    def test_scalar_on_left_not_supported(self, seq3x3):
        with pytest.raises(TypeError):
            2 * seq3x3

    def test_fraction_scaling_is_exact(self):
        m = Matrix(1, 2, [Fraction(1, 3), Fraction(2, 3)])
        m.scale(Fraction(3))
        assert m.tolist() == [[Fraction(1), Fraction(2)]]


class TestHadamard:

    def test_hadamard(self):
        a = Matrix(3, 3, [1, 3, 2, 1, 0, 0, 1, 2, 2])
        b = Matrix(3, 3, [0, 0, 2, 7, 5, 0, 2, 1, 1])
        a.hadamard(b)
        assert a == Matrix(3, 3, [0, 0, 4, 7, 0, 0, 2, 2, 2])

    def test_shape_mismatch(self, a2):
        with pytest.raises(DimensionError, match="Matrix.hadamard"):
            a2.hadamard(Matrix.zeros(1, 4, dtype=int))
        assert a2.tolist() == [[1, 2], [3, 4]]


class TestMulVector:

    def test_scales_each_row(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        m.mul_vector(Vector([10, -1]))
        assert m.tolist() == [[10, 20, 30], [-4, -5, -6]]
        assert m.shape == (2, 3)

    def test_is_not_a_matrix_vector_product(self, a2):
        a2.mul_vector(Vector([1, 1]))
        assert a2.shape == (2, 2)
        assert a2.tolist() == [[1, 2], [3, 4]]

    def test_length_must_equal_rows(self):
        m = Matrix(2, 3, [1, 2, 3, 4, 5, 6])
        with pytest.raises(DimensionError, match="row count vs vector length mismatch, expected 2, got 3"):
            m.mul_vector(Vector([1, 2, 3]))
        assert m.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_vector_not_consumed(self, a2):
        v = Vector([2, 3])
        a2.mul_vector(v)
        assert v.tolist() == [2, 3]
