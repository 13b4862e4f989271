"""
Algebraic properties over random integer-valued matrices.

Integer entries in [-9, 10) keep every intermediate exactly
representable in float32, so identities hold with exact equality.
"""

import pytest

from pymatrix import Matrix, identity, zeros


SIZES = [1, 2, 3, 4, 6]


@pytest.mark.parametrize("n", SIZES)
class TestAdditiveProperties:

    def test_zero_is_additive_identity(self, int_matrix, n):
        a = int_matrix(n)
        assert a + zeros(n) == a
        assert zeros(n) + a == a

    def test_self_subtraction_is_zero(self, int_matrix, n):
        a = int_matrix(n)
        assert a - a == zeros(n)

    def test_addition_commutes(self, int_matrix, n):
        a, b = int_matrix(n), int_matrix(n)
        assert a + b == b + a

    def test_addition_associates(self, int_matrix, n):
        a, b, c = int_matrix(n), int_matrix(n), int_matrix(n)
        assert (a + b) + c == a + (b + c)

    def test_subtraction_undoes_addition(self, int_matrix, n):
        a, b = int_matrix(n), int_matrix(n)
        assert (a + b) - b == a


@pytest.mark.parametrize("n", SIZES)
class TestMultiplicativeProperties:

    def test_identity_on_right(self, int_matrix, n):
        a = int_matrix(n)
        assert a @ identity(n) == a

    def test_identity_on_left(self, int_matrix, n):
        a = int_matrix(n)
        assert identity(n) @ a == a

    def test_zero_absorbs(self, int_matrix, n):
        a = int_matrix(n)
        assert a @ zeros(n) == zeros(n)
        assert zeros(n) @ a == zeros(n)

    def test_distributes_over_addition(self, int_matrix, n):
        a, b, c = int_matrix(n), int_matrix(n), int_matrix(n)
        assert a @ (b + c) == a @ b + a @ c


class TestNonCommutativity:

    def test_subtraction_does_not_commute(self, int_matrix):
        a = int_matrix(3)
        b = a.copy()
        b[0, 0] = a[0, 0] + 1.0
        assert a != b
        assert a - b != b - a

    def test_product_does_not_commute(self, m1, m2):
        assert m1 @ m2 != m2 @ m1

    def test_empty_identities(self):
        e = Matrix[0]()
        assert e + e == e
        assert e @ identity(0) == e
