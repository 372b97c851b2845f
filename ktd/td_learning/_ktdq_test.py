import jax
import jax.numpy as jnp
import numpy as onp
import haiku as hk
from gymnasium.spaces import Discrete

from .._base.test_case import TestCase, ChainEnv
from ..utils import ravel_func
from ._base import KTD
from ._bootstrap import GreedyBootstrap
from ._ktdq import KTDQ


class TestKTDQ(TestCase):

    def test_actions(self):
        ktdq = KTDQ(onp.zeros(4), self.q_linear, actions=Discrete(3))
        self.assertEqual(ktdq.actions, (0, 1, 2))
        self.assertIsInstance(ktdq.bootstrap, GreedyBootstrap)

    def test_same_as_engine_with_greedy_bootstrap(self):
        ktdq = KTDQ(onp.zeros(4), self.q_nonlinear, actions=[0, 1], random_amplitude=0.3,
                    random_seed=5)
        ktd = KTD(onp.zeros(4), self.q_nonlinear, GreedyBootstrap([0, 1]), random_amplitude=0.3,
                  random_seed=5)
        for args in [(0, 1, 1., 2), (2, 0, 0., 3), (3, 1, -1.)]:
            metrics = ktdq.learn(*args)
            ktd.learn(*args)
        onp.testing.assert_array_equal(ktdq.theta, ktd.theta)
        onp.testing.assert_array_equal(ktdq.covariance_factor, ktd.covariance_factor)
        self.assertIn('KTDQ/td_error', metrics)

    def test_ignores_next_action(self):
        ktdq1 = KTDQ(onp.zeros(4), self.q_nonlinear, actions=[0, 1], random_seed=3)
        ktdq2 = KTDQ(onp.zeros(4), self.q_nonlinear, actions=[0, 1], random_seed=3)
        ktdq1.learn(0, 1, 1., 2, 0)
        ktdq2.learn(0, 1, 1., 2, 1)
        onp.testing.assert_array_equal(ktdq1.theta, ktdq2.theta)

    def test_chain_off_policy(self):
        env = ChainEnv()
        theta = onp.zeros(env.num_states * env.num_actions)
        q = self.q_tabular
        ktdq = KTDQ(theta, q, actions=range(env.num_actions), gamma=0.9, random_seed=1)
        rnd = onp.random.RandomState(7)

        # uniformly random behavior policy
        for _ in range(50):
            s, _ = env.reset()
            for _ in range(100):
                a = rnd.randint(env.num_actions)
                s_next, r, done, truncated, _ = env.step(a)
                if done:
                    ktdq.learn(s, a, r)
                    break
                ktdq.learn(s, a, r, s_next)
                s = s_next

        # the greedy policy w.r.t. the shared buffer goes right
        for s in range(1, env.num_states - 1):
            self.assertGreater(q(theta, s, 1), q(theta, s, 0))
        self.assertAlmostEqual(q(theta, 3, 1), 1., places=1)
        self.assertPositiveDefinite(ktdq.covariance)

    def test_haiku_mlp(self):
        def forward(s, a):
            mlp = hk.nets.MLP([4, 1], activation=jnp.tanh)
            return mlp(jnp.concatenate([s, jax.nn.one_hot(a, 2)]))[0]

        net = hk.without_apply_rng(hk.transform(forward))
        params = net.init(jax.random.PRNGKey(13), jnp.zeros(3), 0)
        theta, q = ravel_func(net.apply, params)

        ktdq = KTDQ(theta, q, actions=[0, 1], prior_var=1e-2, random_amplitude=0.1,
                    random_seed=17)
        self.assertIs(ktdq.theta, theta)
        theta_init = theta.copy()

        rnd = onp.random.RandomState(11)
        for _ in range(3):
            s, s_next = rnd.randn(3), rnd.randn(3)
            ktdq.learn(s, rnd.randint(2), 1., s_next)

        self.assertFalse(onp.allclose(theta, theta_init))
        self.assertPositiveDefinite(ktdq.covariance)
        value, variance = ktdq.evaluate(onp.ones(3), 1, return_variance=True)
        self.assertTrue(onp.isfinite(value))
        self.assertGreater(variance, 0)
