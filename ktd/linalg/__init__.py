r"""

Linear Algebra
==============

.. autosummary::
    :nosignatures:

    ktd.linalg.cholesky_update
    ktd.linalg.cholesky_update_reference

----

The KTD critics never store the parameter covariance itself, only a lower-triangular square root
:math:`L`. The correction step shrinks the covariance by a rank-one term, which is applied
directly to :math:`L` by :func:`ktd.linalg.cholesky_update`.


Object Reference
----------------

.. autofunction:: ktd.linalg.cholesky_update
.. autofunction:: ktd.linalg.cholesky_update_reference

"""

from ._cholesky import cholesky_update, cholesky_update_reference


__all__ = (
    'cholesky_update',
    'cholesky_update_reference',
)
