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

from .._base.errors import NotPositiveDefiniteError, DimensionMismatchError


__all__ = (
    'cholesky_update',
    'cholesky_update_reference',
)


def _check_inputs(L, x):
    L = onp.asarray(L, dtype='float64')
    x = onp.asarray(x, dtype='float64')
    if L.ndim != 2 or L.shape[0] != L.shape[1]:
        raise DimensionMismatchError(f"expected a square factor, got shape: {L.shape}")
    if x.shape != (L.shape[0],):
        raise DimensionMismatchError(
            f"expected a vector of shape {(L.shape[0],)}, got shape: {x.shape}")
    return L, x


def cholesky_update(L, x, alpha=1., overwrite=False):
    r"""

    Rank-one modification of a Cholesky factor.

    Given a lower-triangular :math:`L`, compute the lower-triangular factor :math:`L'` of

    .. math::

        L'L'^\top\ =\ LL^\top + \alpha\,xx^\top

    in :math:`O(n^2)`. A negative :math:`\alpha` gives a downdate. The factor is first put in
    :math:`LDU`-form, after which the rank-one LU modification of Stange, Griewank and Bollhöfer
    (2007, fig. 2.1, left) is applied and the result is turned back into a Cholesky factor.

    Parameters
    ----------
    L : ndarray, shape: [n, n]

        Lower-triangular Cholesky factor. Entries above the diagonal are ignored.

    x : ndarray, shape: [n]

        The direction of the rank-one term.

    alpha : float, optional

        The coefficient of the rank-one term.

    overwrite : bool, optional

        Whether to write the result into ``L``. This requires ``L`` to be a float64 array.

    Returns
    -------
    L_new : ndarray, shape: [n, n]

        The updated lower-triangular factor.

    Raises
    ------
    NotPositiveDefiniteError

        If :math:`LL^\top+\alpha\,xx^\top` is not positive definite, i.e. if any of the pivots
        is non-positive. The factor is never clamped.

    """
    L_in = L
    L, x = _check_inputs(L, x)
    n = L.shape[0]

    d = onp.diag(L).copy()
    if not onp.all(d != 0):
        raise NotPositiveDefiniteError("cholesky factor has a zero on its diagonal")

    # LU form: unit lower-triangular Lu = L D^{-1} and upper-triangular U = D L^T
    Lu = onp.tril(L) / d
    U = d[:, None] * onp.tril(L).T
    x = x.copy()
    y = alpha * x

    for i in range(n):
        U[i, i] += x[i] * y[i]
        if not U[i, i] > 0:
            raise NotPositiveDefiniteError(
                f"pivot {i} became non-positive ({U[i, i]}) during rank-one update")
        y[i] /= U[i, i]

        x[i + 1:] -= x[i] * Lu[i + 1:, i]
        Lu[i + 1:, i] += y[i] * x[i + 1:]

        U[i, i + 1:] += x[i] * y[i + 1:]
        y[i + 1:] -= y[i] * U[i, i + 1:]

    L_new = Lu * onp.sqrt(onp.diag(U))

    if overwrite:
        L_in[...] = L_new
        return L_in
    return L_new


def cholesky_update_reference(L, x, alpha=1.):
    r"""

    Rank-one modification of a Cholesky factor by full refactorization.

    This computes the same factor as :func:`cholesky_update`, but it does so by forming
    :math:`LL^\top+\alpha\,xx^\top` explicitly and refactorizing it, which costs :math:`O(n^3)`.

    Parameters
    ----------
    L : ndarray, shape: [n, n]

        Lower-triangular Cholesky factor.

    x : ndarray, shape: [n]

        The direction of the rank-one term.

    alpha : float, optional

        The coefficient of the rank-one term.

    Returns
    -------
    L_new : ndarray, shape: [n, n]

        The updated lower-triangular factor (with a positive diagonal).

    Raises
    ------
    NotPositiveDefiniteError

        If :math:`LL^\top+\alpha\,xx^\top` is not positive definite.

    """
    L, x = _check_inputs(L, x)
    L = onp.tril(L)
    A = L @ L.T + alpha * onp.outer(x, x)
    try:
        return onp.linalg.cholesky(A)
    except onp.linalg.LinAlgError as e:
        raise NotPositiveDefiniteError(str(e)) from e
