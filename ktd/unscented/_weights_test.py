import numpy as onp
import pytest

from .._base.test_case import TestCase
from .._base.errors import ConfigurationError
from ._weights import UnscentedWeights
from ._sigma_points import sigma_points


class TestUnscentedWeights(TestCase):

    def test_weights_sum_to_one(self):
        for n in (1, 2, 5, 17):
            for alpha, beta, kappa in [(1e-1, 2., 0.), (1., 0., 3.), (0.5, 2., 1.), (1e-3, 2., 0.)]:
                w = UnscentedWeights.from_hyperparams(n, alpha, beta, kappa)
                self.assertAlmostEqual(w.wm0 + 2 * n * w.wi, 1., places=8)

    def test_reference_values(self):
        w = UnscentedWeights.from_hyperparams(1, alpha=1e-1, beta=2., kappa=0.)
        self.assertAlmostEqual(w.wm0, -99.)
        self.assertAlmostEqual(w.wc0, -96.01)
        self.assertAlmostEqual(w.wi, 50.)
        self.assertAlmostEqual(w.scale, 0.1)

    def test_scale(self):
        n, alpha, kappa = 6, 0.3, 1.
        w = UnscentedWeights.from_hyperparams(n, alpha=alpha, kappa=kappa)
        lambda_ = alpha ** 2 * (n + kappa) - n
        self.assertAlmostEqual(w.scale, onp.sqrt(n + lambda_))

    def test_exact_recovery(self):
        n = 4
        theta = self.rnd.randn(n)
        L = self.random_factor(n)
        w = UnscentedWeights.from_hyperparams(n)
        X = sigma_points(theta, L, w.scale)

        # identity observation
        mean = w.mean(X)
        cov = w.covariance(X, mean)
        self.assertArrayAlmostEqual(mean, theta)
        self.assertArrayAlmostEqual(cov, L @ L.T)

    def test_linear_images(self):
        n = 3
        theta = self.rnd.randn(n)
        L = self.random_factor(n)
        phi = self.features(1, 0, n)
        w = UnscentedWeights.from_hyperparams(n)
        X = sigma_points(theta, L, w.scale)
        Y = X @ phi

        y_mean = w.mean(Y)
        self.assertAlmostEqual(y_mean, theta @ phi)
        self.assertAlmostEqual(w.variance(Y, y_mean), phi @ L @ L.T @ phi)
        self.assertArrayAlmostEqual(w.cross_covariance(X, theta, Y, y_mean), L @ L.T @ phi)

    def test_cross_covariance_ignores_point_zero(self):
        n = 2
        theta = onp.zeros(n)
        X = sigma_points(theta, onp.eye(n), 1.)
        X[0] += 100.  # would dominate the cross-covariance if point 0 contributed
        Y = onp.ones(2 * n + 1)
        Y[0] = -50.
        w = UnscentedWeights(0., 0., 0.25)
        self.assertArrayAlmostEqual(w.cross_covariance(X, theta, Y, 1.), onp.zeros(n))

    def test_bad_hyperparams(self):
        with pytest.raises(ConfigurationError):
            UnscentedWeights.from_hyperparams(0)
        with pytest.raises(ConfigurationError):
            UnscentedWeights.from_hyperparams(3, alpha=1., kappa=-3.)

    def test_num_points(self):
        for n in (1, 2, 5, 17):
            for alpha, kappa in [(1e-1, 0.), (1., 3.), (1e-3, 0.)]:
                w = UnscentedWeights.from_hyperparams(n, alpha=alpha, kappa=kappa)
                self.assertEqual(w.num_points, 2 * n + 1)
                self.assertEqual(len(sigma_points(onp.zeros(n), onp.eye(n), w.scale)),
                                 w.num_points)

        # weights written with a few significant digits
        self.assertEqual(UnscentedWeights(-99., -96., 12.5).num_points, 9)
        self.assertEqual(UnscentedWeights(0., 0., 0.25).num_points, 5)
