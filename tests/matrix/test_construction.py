"""
Tests for Matrix sizing and construction: Matrix[n], zeros, identity,
from_rows.
"""

import numpy as np
import pytest

from pymatrix import Matrix, zeros, identity, from_rows
from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.core.precision import EPSILON_32


class TestSizedClass:
    """Matrix[n] binds the size at class level."""

    def test_cached(self):
        assert Matrix[4] is Matrix[4]

    def test_distinct_sizes(self):
        assert Matrix[3] is not Matrix[4]

    def test_size_attribute(self):
        assert Matrix[3].size == 3
        assert Matrix[3]().size == 3

    def test_subclass_of_matrix(self):
        assert issubclass(Matrix[2], Matrix)
        assert isinstance(Matrix[2](), Matrix)

    def test_numpy_integer_size(self):
        assert Matrix[np.int64(2)] is Matrix[2]

    def test_base_cannot_be_instantiated(self):
        with pytest.raises(ValidationError, match="not bound"):
            Matrix()

    def test_base_identity_needs_size(self):
        with pytest.raises(ValidationError, match="not bound"):
            Matrix.identity()

    def test_negative_size_fails(self):
        with pytest.raises(ValidationError):
            Matrix[-1]

    def test_non_integer_size_fails(self):
        with pytest.raises(ValidationError):
            Matrix["4"]

    def test_resizing_sized_class_fails(self):
        with pytest.raises(ValidationError, match="already sized"):
            Matrix[4][3]


class TestZeros:

    def test_default_is_zero(self):
        m = Matrix[3]()
        np.testing.assert_array_equal(m.to_array(), np.zeros((3, 3)))

    def test_zeros_classmethod(self):
        assert Matrix[4].zeros() == Matrix[4]()

    def test_free_function(self):
        assert zeros(2) == Matrix[2]()

    def test_shape(self):
        assert Matrix[5]().shape == (5, 5)

    def test_dtype_is_float32(self):
        assert Matrix[2]().to_array().dtype == np.float32

    def test_empty(self):
        m = zeros(0)
        assert m.shape == (0, 0)
        assert m.tolist() == []


class TestIdentity:

    def test_identity_3(self):
        m = identity(3)
        assert m.tolist() == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]

    def test_identity_classmethod(self):
        assert Matrix[4].identity() == identity(4)

    def test_identity_1(self):
        assert identity(1).tolist() == [[1.0]]

    def test_identity_0_is_empty(self):
        assert identity(0) == zeros(0)

    def test_identity_not_zero(self):
        assert identity(2) != zeros(2)


class TestFromRows:

    def test_values_preserved(self, m1):
        assert m1.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_row_major(self):
        m = from_rows([[1, 2], [3, 4]])
        assert m[0, 1] == 2.0
        assert m[1, 0] == 3.0

    def test_size_inferred(self):
        m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert type(m) is Matrix[3]

    def test_sized_from_rows(self):
        m = Matrix[2].from_rows([[1, 2], [3, 4]])
        assert type(m) is Matrix[2]

    def test_free_function_with_size(self):
        assert type(from_rows([[1, 2], [3, 4]], size=2)) is Matrix[2]

    def test_size_mismatch_fails(self):
        with pytest.raises(DimensionError, match="expected a 3x3") as exc_info:
            Matrix[3].from_rows([[1, 2], [3, 4]])
        assert exc_info.value.expected == (3, 3)
        assert exc_info.value.actual == (2, 2)

    def test_non_square_fails(self):
        with pytest.raises(DimensionError, match="square"):
            Matrix.from_rows([[1, 2, 3], [4, 5, 6]])

    def test_1d_fails(self):
        with pytest.raises(DimensionError, match="2D"):
            Matrix.from_rows([1, 2, 3, 4])

    def test_ragged_fails(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[1, 2], [3]])

    def test_strings_fail(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([["a", "b"], ["c", "d"]])

    def test_empty_literal(self):
        m = Matrix.from_rows(np.empty((0, 0)))
        assert type(m) is Matrix[0]

    def test_input_is_copied(self):
        src = np.array([[1.0, 2.0], [3.0, 4.0]], dtype=np.float32)
        m = Matrix.from_rows(src)
        src[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_from_matrix_copies(self, m1):
        m = Matrix.from_rows(m1)
        m[0, 0] = 99.0
        assert m1[0, 0] == 1.0

    def test_rounded_to_float32(self):
        m = Matrix.from_rows([[0.1]])
        assert m[0, 0] == float(np.float32(0.1))

    def test_below_float32_resolution_rounds_away(self):
        m = Matrix.from_rows([[1.0 + EPSILON_32 / 4, 1.0 + EPSILON_32]])
        assert m[0, 0] == 1.0
        assert m[0, 1] == 1.0 + EPSILON_32

    def test_non_finite_accepted(self):
        m = Matrix.from_rows([[np.nan, np.inf], [-np.inf, 0.0]])
        assert np.isnan(m[0, 0])
        assert m[0, 1] == np.inf
        assert m[1, 0] == -np.inf

    def test_float32_overflow_becomes_inf(self):
        m = Matrix.from_rows([[1e300]])
        assert m[0, 0] == np.inf


class TestConversion:

    def test_to_array_is_copy(self, m1):
        arr = m1.to_array()
        arr[0, 0] = 99.0
        assert m1[0, 0] == 1.0

    def test_copy_is_independent(self, m1):
        c = m1.copy()
        assert c == m1
        c[0, 0] = 99.0
        assert m1[0, 0] == 1.0
        assert type(c) is type(m1)

    def test_iter_rows(self, m1):
        assert list(m1) == [(1.0, 2.0), (3.0, 4.0)]

    def test_repr(self, m1):
        assert repr(m1) == "Matrix[2]([[1.0, 2.0], [3.0, 4.0]])"

    def test_repr_shortest_float32(self):
        assert repr(Matrix.from_rows([[0.1]])) == "Matrix[1]([[0.1]])"

    def test_unhashable(self, m1):
        with pytest.raises(TypeError):
            hash(m1)
