r"""
TD Learning
===========

.. autosummary::
    :nosignatures:

    ktd.td_learning.KTD
    ktd.td_learning.KTDQ
    ktd.td_learning.KTDSarsa
    ktd.td_learning.GreedyBootstrap
    ktd.td_learning.OnPolicyBootstrap

----

This is a collection of Kalman Temporal Differences (KTD) critics. Rather than following a
gradient, a KTD critic maintains a Gaussian belief over the parameters of a value function
:math:`q_\theta(s,a)` and updates it with an unscented Kalman filter step after every transition.

The variants differ only in the manner in which the bootstrap term is constructed. This is
delegated to a *bootstrap strategy*, which is a callable that evaluates the next-state value for a
single sigma point. :class:`ktd.td_learning.KTDQ` maximizes over a finite action set, while
:class:`ktd.td_learning.KTDSarsa` uses the next action that was actually taken.


Object Reference
----------------

.. autoclass:: ktd.td_learning.KTD
.. autoclass:: ktd.td_learning.KTDQ
.. autoclass:: ktd.td_learning.KTDSarsa
.. autoclass:: ktd.td_learning.GreedyBootstrap
.. autoclass:: ktd.td_learning.OnPolicyBootstrap


"""

from ._base import KTD, Hyperparams
from ._bootstrap import GreedyBootstrap, OnPolicyBootstrap
from ._ktdq import KTDQ
from ._ktdsarsa import KTDSarsa


__all__ = (
    'KTD',
    'KTDQ',
    'KTDSarsa',
    'GreedyBootstrap',
    'OnPolicyBootstrap',
    'Hyperparams',
)
