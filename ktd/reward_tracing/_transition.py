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

from ..utils import check_scalar


__all__ = (
    'Transition',
)


class Transition:
    r"""

    A container object for a single MDP transition.

    Parameters
    ----------
    s : state observation

        A single state observation :math:`S_t`.

    a : action

        A single action :math:`A_t`.

    r : float

        A single reward :math:`R_t`.

    done : bool

        Whether :math:`S_{t+1}` is a terminal state. If so, ``s_next`` and ``a_next`` are ignored.

    s_next : state observation, optional

        A single next-state observation :math:`S_{t+1}`. Required if ``done=False``.

    a_next : action, optional

        A single next-action :math:`A_{t+1}`, sampled from the behavior policy. This is required
        for SARSA-style updates.

    """
    __slots__ = ('s', 'a', 'r', 'done', 's_next', 'a_next')

    def __init__(self, s, a, r, done, s_next=None, a_next=None):
        if not done and s_next is None:
            raise ValueError("s_next must be provided for a non-terminal transition")
        self.s = s
        self.a = a
        self.r = check_scalar(r)
        self.done = bool(done)
        self.s_next = None if self.done else s_next
        self.a_next = None if self.done else a_next

    @classmethod
    def from_step(cls, s, a, step_output, a_next=None):
        r"""

        Create a transition from the output of a gymnasium-style :func:`env.step` call.

        Parameters
        ----------
        s : state observation

            The state observation :math:`S_t` that was fed to the policy.

        a : action

            The action :math:`A_t` passed to :func:`env.step`.

        step_output : tuple

            The 5-tuple ``(s_next, r, done, truncated, info)`` returned by :func:`env.step`.

        a_next : action, optional

            The next action :math:`A_{t+1}`, if already sampled.

        Returns
        -------
        transition : Transition

            A single transition. Truncation is not treated as termination.

        """
        s_next, r, done, _, _ = step_output
        return cls(s, a, r, done, s_next, a_next)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(s={self.s!r}, a={self.a!r}, r={self.r!r}, "
            f"done={self.done!r}, s_next={self.s_next!r}, a_next={self.a_next!r})")

    def __iter__(self):
        return iter((self.s, self.a, self.r, self.done, self.s_next, self.a_next))
