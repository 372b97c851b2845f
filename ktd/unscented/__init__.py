r"""

Unscented Transform
===================

.. autosummary::
    :nosignatures:

    ktd.unscented.UnscentedWeights
    ktd.unscented.sigma_points

----

The Unscented Transform propagates a Gaussian belief :math:`\mathcal{N}(\theta, LL^\top)` through a
nonlinear function by evaluating that function on a small, deterministic set of :math:`2n+1`
*sigma points*. The images are recombined with three scalar weights into a predicted mean, a
predicted variance and a cross-covariance with the parameters.


Object Reference
----------------

.. autoclass:: ktd.unscented.UnscentedWeights
.. autofunction:: ktd.unscented.sigma_points

"""

from ._weights import UnscentedWeights
from ._sigma_points import sigma_points


__all__ = (
    'UnscentedWeights',
    'sigma_points',
)
