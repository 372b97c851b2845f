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

import numpy as onp

from .._base.errors import DimensionMismatchError


__all__ = (
    'sigma_points',
)


def sigma_points(theta, L, scale, out=None):
    r"""

    Generate the :math:`2n+1` sigma points of the Unscented Transform.

    .. math::

        \theta_0\ &=\ \theta \\
        \theta_i\ &=\ \theta + c\,L_{:,i}         & i=1,\dots,n \\
        \theta_{n+i}\ &=\ \theta - c\,L_{:,i}     & i=1,\dots,n

    where :math:`c=\sqrt{n+\lambda}` and :math:`L` is a square root of the covariance, i.e.
    :math:`LL^\top=\Sigma`.

    Parameters
    ----------
    theta : ndarray, shape: [n]

        The mean.

    L : ndarray, shape: [n, n]

        A (lower-triangular) square root of the covariance.

    scale : float

        The spread :math:`c`, see :attr:`UnscentedWeights.scale`.

    out : ndarray, shape: [2n+1, n], optional

        If provided, the sigma points are written into this array.

    Returns
    -------
    X : ndarray, shape: [2n+1, n]

        The sigma points, one per row.

    """
    theta = onp.asarray(theta)
    L = onp.asarray(L)
    n = theta.shape[0]
    if L.shape != (n, n):
        raise DimensionMismatchError(
            f"covariance factor has shape {L.shape}, expected: {(n, n)}")
    if out is None:
        out = onp.empty((2 * n + 1, n), dtype='float64')
    elif out.shape != (2 * n + 1, n):
        raise DimensionMismatchError(
            f"sigma-point buffer has shape {out.shape}, expected: {(2 * n + 1, n)}")

    # columns of L become rows of X
    out[0] = theta
    out[1:n + 1] = theta + scale * L.T
    out[n + 1:] = theta - scale * L.T
    return out
