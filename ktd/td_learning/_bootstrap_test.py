import numpy as onp
import pytest
from gymnasium.spaces import Discrete

from .._base.test_case import TestCase
from .._base.errors import ConfigurationError, DimensionMismatchError
from ._bootstrap import GreedyBootstrap, OnPolicyBootstrap


class TestGreedyBootstrap(TestCase):

    def test_max_over_actions(self):
        theta = onp.array([0.1, 0.7, -0.3, 0.4])
        q = lambda theta, s, a: theta[2 * s + a]  # noqa: E731
        bootstrap = GreedyBootstrap([0, 1])
        self.assertAlmostEqual(bootstrap(q, theta, 0), 0.7)
        self.assertAlmostEqual(bootstrap(q, theta, 1, a_next=0), 0.4)  # a_next is ignored

    def test_discrete_space(self):
        self.assertEqual(GreedyBootstrap(Discrete(3)).actions, (0, 1, 2))
        self.assertEqual(GreedyBootstrap(Discrete(2, start=5)).actions, (5, 6))

    def test_generator(self):
        self.assertEqual(GreedyBootstrap(a for a in 'LR').actions, ('L', 'R'))

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            GreedyBootstrap([])

    def test_non_scalar(self):
        bootstrap = GreedyBootstrap([0, 1])
        with pytest.raises(DimensionMismatchError):
            bootstrap(lambda theta, s, a: theta, onp.zeros(2), 0)


class TestOnPolicyBootstrap(TestCase):

    def test_next_action(self):
        theta = onp.array([0.1, 0.7, -0.3, 0.4])
        q = lambda theta, s, a: theta[2 * s + a]  # noqa: E731
        bootstrap = OnPolicyBootstrap()
        self.assertAlmostEqual(bootstrap(q, theta, 1, 0), -0.3)
        self.assertAlmostEqual(bootstrap(q, theta, 0, 0), 0.1)

    def test_requires_next_action(self):
        with pytest.raises(ValueError):
            OnPolicyBootstrap()(lambda theta, s, a: 0., onp.zeros(1), 0)
