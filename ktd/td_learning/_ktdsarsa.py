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
from ._bootstrap import OnPolicyBootstrap


__all__ = (
    'KTDSarsa',
)


class KTDSarsa(KTD):
    r"""

    KTD with SARSA targets. The bootstrap evaluates each sigma point on the next action that was
    actually selected by the behavior policy:

    .. math::

        y_i\ =\ q(\theta_i, s, a) - \gamma\,q(\theta_i, s', a')

    Non-terminal calls to :func:`learn` must therefore provide ``a_next``.

    Parameters
    ----------
    theta : ndarray, shape: [n]

        The (borrowed) parameter buffer.

    q : callable

        The parametrized value function :code:`q(theta, s, a) -> float`.

    \*\*kwargs

        Hyperparameters, see :class:`ktd.td_learning.KTD`.

    """
    def __init__(self, theta, q, **kwargs):
        super().__init__(theta, q, OnPolicyBootstrap(), **kwargs)
