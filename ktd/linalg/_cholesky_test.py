import numpy as onp
import pytest

from .._base.test_case import TestCase
from .._base.errors import NotPositiveDefiniteError, DimensionMismatchError
from ._cholesky import cholesky_update, cholesky_update_reference


class TestCholeskyUpdate(TestCase):

    def test_update_matches_reference(self):
        rnd = self.rnd
        for n in (1, 2, 3, 8, 20):
            L = self.random_factor(n, rnd)
            x = rnd.randn(n)
            L_new = cholesky_update(L, x, alpha=0.7)
            self.assertArrayAlmostEqual(L_new, cholesky_update_reference(L, x, alpha=0.7))
            self.assertArrayAlmostEqual(L_new @ L_new.T, L @ L.T + 0.7 * onp.outer(x, x))

    def test_downdate_matches_reference(self):
        rnd = self.rnd
        for n in (1, 2, 5, 12):
            L = self.random_factor(n, rnd)
            A = L @ L.T
            x = rnd.randn(n)
            # largest alpha that keeps A - alpha x x^T positive definite is 1 / (x^T A^{-1} x)
            alpha = 0.5 / (x @ onp.linalg.solve(A, x))
            L_new = cholesky_update(L, x, alpha=-alpha)
            self.assertArrayAlmostEqual(L_new, cholesky_update_reference(L, x, alpha=-alpha))
            self.assertPositiveDefinite(L_new @ L_new.T)

    def test_lower_triangular_positive_diagonal(self):
        n = 6
        L = self.random_factor(n)
        L_new = cholesky_update(L, self.rnd.randn(n), alpha=-0.01)
        self.assertArrayAlmostEqual(onp.triu(L_new, k=1), onp.zeros((n, n)))
        self.assertTrue(onp.all(onp.diag(L_new) > 0))

    def test_negative_diagonal_input(self):
        n = 4
        L = self.random_factor(n)
        L_flipped = L * onp.array([1., -1., 1., -1.])  # same L L^T
        x = self.rnd.randn(n)
        self.assertArrayAlmostEqual(
            cholesky_update(L_flipped, x, alpha=2.), cholesky_update(L, x, alpha=2.))

    def test_ignores_upper_triangle(self):
        n = 3
        L = self.random_factor(n)
        x = self.rnd.randn(n)
        L_noisy = L + onp.triu(onp.ones((n, n)), k=1)
        self.assertArrayAlmostEqual(cholesky_update(L_noisy, x), cholesky_update(L, x))

    def test_overwrite(self):
        n = 5
        L = self.random_factor(n)
        L_orig = L.copy()
        x = self.rnd.randn(n)

        L_new = cholesky_update(L, x, alpha=0.3)
        self.assertArrayAlmostEqual(L, L_orig)  # untouched

        L_inplace = cholesky_update(L, x, alpha=0.3, overwrite=True)
        self.assertIs(L_inplace, L)
        self.assertArrayAlmostEqual(L, L_new)

    def test_does_not_modify_x(self):
        n = 4
        x = self.rnd.randn(n)
        x_orig = x.copy()
        cholesky_update(self.random_factor(n), x, alpha=-0.001)
        self.assertArrayAlmostEqual(x, x_orig)

    def test_not_positive_definite(self):
        L = onp.eye(3)
        x = onp.array([0., 2., 0.])
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_update(L, x, alpha=-1.)  # I - 4 e_2 e_2^T
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_update_reference(L, x, alpha=-1.)

    def test_singular_is_not_positive_definite(self):
        L = onp.eye(2)
        x = onp.array([1., 0.])
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_update(L, x, alpha=-1.)  # exactly singular

    def test_failed_update_leaves_input_untouched(self):
        L = onp.eye(3)
        with pytest.raises(NotPositiveDefiniteError):
            cholesky_update(L, onp.array([0., 0., 3.]), alpha=-1., overwrite=True)
        self.assertArrayAlmostEqual(L, onp.eye(3))

    def test_shape_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            cholesky_update(onp.eye(3), onp.ones(2))
        with pytest.raises(DimensionMismatchError):
            cholesky_update(onp.ones((2, 3)), onp.ones(2))
