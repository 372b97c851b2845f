r"""

Reward Tracing
==============

.. autosummary::
    :nosignatures:

    ktd.reward_tracing.Transition

----

The KTD critics learn from one transition at a time. A :class:`ktd.reward_tracing.Transition`
bundles the quantities of a single time step so that an episode loop can hand them over to
:func:`KTD.update <ktd.td_learning.KTD.update>` in one go.


Object Reference
----------------

.. autoclass:: ktd.reward_tracing.Transition

"""

from ._transition import Transition


__all__ = (
    'Transition',
)
