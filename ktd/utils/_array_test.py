import jax
import jax.numpy as jnp
import numpy as onp
import haiku as hk
import pytest

from .._base.errors import DimensionMismatchError
from ._array import check_array, check_scalar, ravel_func


def test_check_array():
    check_array(onp.zeros(3), ndim=1, shape=(3,), dtype_kind='f', writeable=True)
    with pytest.raises(TypeError):
        check_array([0., 1.])
    with pytest.raises(TypeError):
        check_array(onp.zeros(3, dtype='int32'), dtype_kind='f')
    with pytest.raises(DimensionMismatchError):
        check_array(onp.zeros((3, 1)), ndim=1)
    with pytest.raises(DimensionMismatchError):
        check_array(onp.zeros(3), shape=(4,))

    readonly = onp.zeros(3)
    readonly.setflags(write=False)
    with pytest.raises(TypeError):
        check_array(readonly, writeable=True)


def test_check_scalar():
    assert check_scalar(3) == 3.
    assert check_scalar(onp.array([2.5])) == 2.5
    assert check_scalar(jnp.float32(1.5)) == 1.5
    with pytest.raises(DimensionMismatchError):
        check_scalar(onp.array([1., 2.]))


def test_ravel_func_haiku_mlp():
    def forward(s, a):
        mlp = hk.nets.MLP([8, 1])
        return mlp(jnp.concatenate([s, a]))[0]

    net = hk.without_apply_rng(hk.transform(forward))
    s, a = jnp.ones(3), jnp.array([0., 1.])
    params = net.init(jax.random.PRNGKey(13), s, a)

    theta, q = ravel_func(net.apply, params)
    assert isinstance(theta, onp.ndarray)
    assert theta.dtype == onp.float64
    assert theta.shape == ((5 * 8 + 8) + (8 * 1 + 1),)

    value = q(theta, s, a)
    assert isinstance(value, float)
    onp.testing.assert_allclose(value, float(net.apply(params, s, a)), rtol=1e-5, atol=1e-6)

    # q depends on the flat parameters
    onp.testing.assert_allclose(q(onp.zeros_like(theta), s, a), 0.)
