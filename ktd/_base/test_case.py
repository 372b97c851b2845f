import unittest

import numpy as onp
from numpy.testing import assert_array_almost_equal


__all__ = (
    'TestCase',
    'ChainEnv',
)


class ChainEnv:
    r"""

    A deterministic chain with states :math:`0,\dots,N-1` and two actions: ``0`` moves left and
    ``1`` moves right. Reaching the right end yields a reward of 1 and terminates the episode.

    The step signature follows gymnasium: :code:`step(a) -> (s_next, r, done, truncated, info)`.

    """
    num_states = 5
    num_actions = 2

    def __init__(self):
        self.s = 0

    def reset(self):
        self.s = 0
        return self.s, {}

    def step(self, a):
        self.s = max(0, self.s - 1) if a == 0 else self.s + 1
        done = self.s == self.num_states - 1
        return self.s, float(done), done, False, {}


class TestCase(unittest.TestCase):
    r""" adds some common properties to unittest.TestCase """
    seed = 42
    decimal = 6  # sets the absolute tolerance

    @property
    def rnd(self):
        return onp.random.RandomState(self.seed)

    @staticmethod
    def features(s, a, n=4):
        r""" A fixed nonlinear feature map :math:`\phi(s,a)\in\mathbb{R}^n`. """
        k = onp.arange(1, n + 1)
        return onp.cos(0.7 * k * s + 1.3 * k * a + 0.1 * k)

    @property
    def q_linear(self):
        r""" :math:`q(\theta,s,a)=\theta^\top\phi(s,a)` """
        features = self.features
        return lambda theta, s, a: float(onp.dot(theta, features(s, a, len(theta))))

    @property
    def q_nonlinear(self):
        r""" :math:`q(\theta,s,a)=\tanh(\theta^\top\phi(s,a))` """
        features = self.features
        return lambda theta, s, a: float(onp.tanh(onp.dot(theta, features(s, a, len(theta)))))

    @property
    def q_tabular(self):
        r""" one parameter per state-action pair of the :class:`ChainEnv` """
        num_actions = ChainEnv.num_actions
        return lambda theta, s, a: float(theta[s * num_actions + a])

    def random_factor(self, n, rnd=None):
        r""" A random lower-triangular factor with a positive diagonal. """
        rnd = self.rnd if rnd is None else rnd
        L = onp.tril(rnd.randn(n, n))
        L[onp.diag_indices(n)] = 0.5 + onp.abs(onp.diag(L))
        return L

    def assertArrayAlmostEqual(self, x, y, decimal=None):
        assert_array_almost_equal(x, y, decimal=(decimal or self.decimal))

    def assertPositiveDefinite(self, A):
        A = onp.asarray(A)
        self.assertArrayAlmostEqual(A, A.T)
        self.assertGreater(onp.min(onp.linalg.eigvalsh(A)), 0)
