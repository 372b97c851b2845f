import ktd
import gymnasium
import numpy as onp
from collections import deque


# the MDP
env = gymnasium.make('FrozenLake-v1', is_slippery=False, render_mode='ansi')
num_actions = env.action_space.n

ktd.utils.enable_logging('frozen_lake.ktd_sarsa')


def q(theta, s, a):
    return theta[s * num_actions + a]


# parameter buffer, one entry per state-action pair
theta = onp.zeros(env.observation_space.n * num_actions)


# on-policy learner
ktdsarsa = ktd.KTDSarsa(theta, q, gamma=0.9, random_amplitude=0.01)
rnd = onp.random.RandomState(13)


def pi(s, epsilon=0.2):
    if rnd.rand() < epsilon:
        return env.action_space.sample()
    return int(onp.argmax([ktdsarsa.evaluate(s, a) for a in range(num_actions)]))


# train
returns = deque(maxlen=20)
for ep in range(500):
    s, info = env.reset(seed=ep)
    a = pi(s)
    G = 0.

    for t in range(env.spec.max_episode_steps):
        s_next, r, done, truncated, info = env.step(a)
        G += r

        # small incentive to keep moving
        if s_next == s:
            r = -0.01

        # update
        if done:
            ktdsarsa.learn(s, a, r)
            break
        a_next = pi(s_next)
        ktdsarsa.learn(s, a, r, s_next, a_next)

        if truncated:
            break

        s, a = s_next, a_next

    returns.append(G)

    # early stopping
    if len(returns) == returns.maxlen and onp.mean(returns) > 0.75:
        break


# run env one more time to render
s, info = env.reset()
print(env.render())

for t in range(env.spec.max_episode_steps):

    # print individual state-action values along with their uncertainty
    for a in range(num_actions):
        value, variance = ktdsarsa.evaluate(s, a, return_variance=True)
        print("  q(s,{:s}) = {:.3f} +/- {:.3f}".format('LDRU'[a], value, onp.sqrt(variance)))

    a = pi(s, epsilon=0.)
    s, r, done, truncated, info = env.step(a)

    print(env.render())

    if done or truncated:
        break


if r < 1:
    name = globals().get('__file__', 'this script')
    raise RuntimeError(f"{name} failed to reach the goal")
