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

from gymnasium.spaces import Discrete

from .._base.errors import ConfigurationError
from ..utils import check_scalar


__all__ = (
    'GreedyBootstrap',
    'OnPolicyBootstrap',
)


class GreedyBootstrap:
    r"""

    Off-policy bootstrap :math:`\max_a q(\theta_i, s', a)`, used by KTD-Q.

    Parameters
    ----------
    actions : iterable or gymnasium.spaces.Discrete

        The finite set of actions to maximize over. The order is preserved.

    """
    def __init__(self, actions):
        if isinstance(actions, Discrete):
            start = int(getattr(actions, 'start', 0))
            actions = range(start, start + int(actions.n))
        self.actions = tuple(actions)
        if not self.actions:
            raise ConfigurationError("the action set of a greedy bootstrap may not be empty")

    def __call__(self, q, params, s_next, a_next=None):
        return max(check_scalar(q(params, s_next, a)) for a in self.actions)

    def __repr__(self):
        return f"{self.__class__.__name__}(actions={self.actions!r})"


class OnPolicyBootstrap:
    r"""

    On-policy bootstrap :math:`q(\theta_i, s', a')`, used by KTD-SARSA. The next action
    :math:`a'` is the one that was actually selected by the behavior policy.

    """
    def __call__(self, q, params, s_next, a_next=None):
        if a_next is None:
            raise ValueError("an on-policy bootstrap requires the next action a_next")
        return check_scalar(q(params, s_next, a_next))

    def __repr__(self):
        return f"{self.__class__.__name__}()"
