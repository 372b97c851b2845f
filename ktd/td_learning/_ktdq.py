# ------------------------------------------------------------------------------------------------ #
# MIT License                                                                                      #
#                                                                                                  #
# Copyright (c) 2026, ktd developers                                                               #
#                                                                                                  #
# Permission is hereby granted, free of charge, to any person obtaining a copy of this software    #
# and associated documentation files (the "Software"), to deal in the Software without             #
# restriction, including without limitation the rights to use, copy, modify, merge, publish,       #
# distribute, sublicense, and/or sell copies of the Software, and to permit persons to whom the    #
# Software is furnished to do so, subject to the following conditions:                             #
#                                                                                                  #
# The above copyright notice and this permission notice shall be included in all copies or         #
# substantial portions of the Software.                                                            #
#                                                                                                  #
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, INCLUDING    #
# BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND       #
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM,     #
# DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,   #
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.          #
# ------------------------------------------------------------------------------------------------ #

from ._base import KTD
from ._bootstrap import GreedyBootstrap


__all__ = (
    'KTDQ',
)


class KTDQ(KTD):
    r"""

    KTD with Q-learning targets. The bootstrap is the greedy value of the next state under each
    sigma point:

    .. math::

        y_i\ =\ q(\theta_i, s, a) - \gamma\,\max_{a'}q(\theta_i, s', a')

    This makes KTD-Q an off-policy critic: the transitions may be collected by any behavior
    policy, and ``a_next`` is ignored.

    Parameters
    ----------
    theta : ndarray, shape: [n]

        The (borrowed) parameter buffer.

    q : callable

        The parametrized value function :code:`q(theta, s, a) -> float`.

    actions : iterable or gymnasium.spaces.Discrete

        The finite set of actions to maximize over.

    \*\*kwargs

        Hyperparameters, see :class:`ktd.td_learning.KTD`.

    """
    def __init__(self, theta, q, actions, **kwargs):
        super().__init__(theta, q, GreedyBootstrap(actions), **kwargs)

    @property
    def actions(self):
        r""" The action set that the bootstrap maximizes over. """
        return self.bootstrap.actions
