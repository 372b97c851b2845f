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

import jax
import jax.numpy as jnp
import numpy as onp
from jax.flatten_util import ravel_pytree

from .._base.errors import DimensionMismatchError


__all__ = (
    'check_array',
    'check_scalar',
    'ravel_func',
)


def check_array(arr, ndim=None, shape=None, dtype_kind=None, writeable=False):
    r"""

    This helper function is mostly for internal use. It is used to check a few
    common properties of a numpy array.

    Raises
    ------
    TypeError

        If the input is not a numpy array, or if its dtype is of the wrong kind.

    DimensionMismatchError

        If the number of dimensions or the shape doesn't match.

    """
    if not isinstance(arr, onp.ndarray):
        raise TypeError(f"expected input to be a numpy.ndarray, got type: {type(arr)}")

    check = dtype_kind is not None
    if check and arr.dtype.kind not in dtype_kind:
        raise TypeError(f"expected input with dtype kind(s) {dtype_kind!r}, got dtype: {arr.dtype}")

    if writeable and not arr.flags.writeable:
        raise TypeError("expected a writeable array")

    check = ndim is not None
    if check and arr.ndim != ndim:
        raise DimensionMismatchError(f"expected input with ndim {ndim}, got ndim: {arr.ndim}")

    check = shape is not None
    if check and arr.shape != tuple(shape):
        raise DimensionMismatchError(
            f"expected input with shape {tuple(shape)}, got shape: {arr.shape}")


def check_scalar(value):
    r"""

    Convert the output of a value function to a python float.

    Raises
    ------
    DimensionMismatchError

        If the value holds more (or less) than one number.

    """
    arr = onp.asarray(value)
    if arr.size != 1:
        raise DimensionMismatchError(
            f"expected value function to return a scalar, got shape: {arr.shape}")
    return float(arr.reshape(()))


def ravel_func(func, params):
    r"""

    Adapt a pytree-parametrized function to the flat-parameter contract of the KTD critics.

    The KTD critics maintain a Gaussian belief over a single flat parameter vector
    :math:`\theta\in\mathbb{R}^n`. Models built with e.g. Haiku carry their weights in a nested
    dict instead. This helper flattens the initial weights and wraps ``func`` such that it accepts
    the flat vector.

    Example
    -------

    .. code:: python

        def forward(s, a):
            mlp = hk.nets.MLP([8, 1])
            return mlp(jnp.concatenate([s, a]))[0]

        net = hk.without_apply_rng(hk.transform(forward))
        params = net.init(jax.random.PRNGKey(13), s_example, a_example)
        theta, q = ravel_func(net.apply, params)

        ktdq = KTDQ(theta, q, actions=...)

    Parameters
    ----------
    func : callable

        A function with signature :code:`func(params, s, a) -> scalar`.

    params : pytree with ndarray leaves

        Example parameters, used to determine the structure of the pytree.

    Returns
    -------
    theta : ndarray with ndim=1

        The flattened parameters as a float64 numpy array. This is the buffer to lend to the
        critic.

    q : callable

        The adapted function with signature :code:`q(theta, s, a) -> float`.

    """
    flat, unravel = ravel_pytree(params)
    dtype = flat.dtype
    func = jax.jit(func)

    def q(theta, s, a):
        return check_scalar(func(unravel(jnp.asarray(theta, dtype=dtype)), s, a))

    return onp.array(flat, dtype='float64'), q
