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

from collections import namedtuple

import numpy as onp

from .._base.errors import ConfigurationError


__all__ = (
    'UnscentedWeights',
)


class UnscentedWeights(namedtuple('UnscentedWeights', ('wm0', 'wc0', 'wi'))):
    r"""

    The three scalar weights of the (scaled) Unscented Transform.

    Sigma point :math:`0` gets the mean weight :math:`w^{(m)}_0` and the covariance weight
    :math:`w^{(c)}_0`, while all other :math:`2n` sigma points share the uniform weight
    :math:`w_i`:

    .. math::

        w^{(m)}_0\ &=\ \frac{\lambda}{n+\lambda} \\
        w^{(c)}_0\ &=\ w^{(m)}_0 + 1 - \alpha^2 + \beta \\
        w_i\ &=\ \frac{1}{2(n+\lambda)}

    where :math:`\lambda=\alpha^2(n+\kappa)-n`.

    Parameters
    ----------
    wm0 : float

        Mean weight of sigma point 0.

    wc0 : float

        Covariance weight of sigma point 0.

    wi : float

        Weight of each of the other sigma points.

    """
    __slots__ = ()

    @classmethod
    def from_hyperparams(cls, n, alpha=1e-1, beta=2., kappa=0.):
        r"""

        Derive the weights from the Unscented-Transform hyperparameters.

        Parameters
        ----------
        n : positive int

            The dimension of the parameter vector.

        alpha : float, optional

            Spread of the sigma points around the mean.

        beta : float, optional

            Prior knowledge about the distribution, :math:`\beta=2` is optimal for Gaussians.

        kappa : float, optional

            Secondary scaling parameter.

        Returns
        -------
        weights : UnscentedWeights

            The weights.

        """
        if n < 1:
            raise ConfigurationError(f"dimension must be a positive int, got: {n}")
        lambda_ = alpha * alpha * (n + kappa) - n
        if not n + lambda_ > 0:
            raise ConfigurationError(
                f"n + lambda must be positive, got: {n + lambda_} (n={n}, alpha={alpha}, "
                f"kappa={kappa})")
        wm0 = lambda_ / (n + lambda_)
        wc0 = wm0 + 1 - alpha * alpha + beta
        wi = 1. / (2 * (n + lambda_))
        return cls(float(wm0), float(wc0), float(wi))

    @property
    def scale(self):
        r""" The sigma-point spread :math:`\sqrt{n+\lambda}`. """
        return onp.sqrt(1. / (2 * self.wi))

    @property
    def num_points(self):
        r"""

        The number of sigma points :math:`2n+1`.

        This follows from :math:`w^{(m)}_0+2n\,w_i=1`, so it is also available for weights that
        were read back from a stream.

        """
        return 1 + int(round((1. - self.wm0) / self.wi))

    def mean(self, Y):
        r"""

        Weighted mean of the sigma-point images.

        Parameters
        ----------
        Y : ndarray, shape: [2n+1, ...]

            The images of the sigma points, one per row.

        Returns
        -------
        y_mean : ndarray, shape: [...]

            The predicted mean :math:`w^{(m)}_0\,y_0+w_i\sum_{i=1}^{2n}y_i`.

        """
        Y = onp.asarray(Y)
        return self.wm0 * Y[0] + self.wi * onp.sum(Y[1:], axis=0)

    def variance(self, Y, y_mean):
        r"""

        Weighted variance of scalar sigma-point images.

        .. math::

            P_y\ =\ w^{(c)}_0\,(y_0-\hat{y})^2 + w_i\sum_{i=1}^{2n}(y_i-\hat{y})^2

        Parameters
        ----------
        Y : ndarray, shape: [2n+1]

            The images of the sigma points.

        y_mean : float

            The predicted mean, see :func:`mean`.

        """
        d = onp.asarray(Y) - y_mean
        return self.wc0 * d[0] ** 2 + self.wi * onp.sum(d[1:] ** 2)

    def covariance(self, Y, y_mean):
        r"""

        Weighted covariance matrix of vector-valued sigma-point images.

        Parameters
        ----------
        Y : ndarray, shape: [2n+1, m]

            The images of the sigma points, one per row.

        y_mean : ndarray, shape: [m]

            The predicted mean, see :func:`mean`.

        Returns
        -------
        P : ndarray, shape: [m, m]

            The covariance matrix.

        """
        D = onp.asarray(Y) - y_mean
        return self.wc0 * onp.outer(D[0], D[0]) + self.wi * D[1:].T @ D[1:]

    def cross_covariance(self, X, x_mean, Y, y_mean):
        r"""

        Weighted cross-covariance between sigma points and their scalar images.

        .. math::

            P_{\theta y}\ =\ w_i\sum_{i=1}^{2n}(\theta_i-\theta)\,(y_i-\hat{y})

        Sigma point :math:`0` does not contribute to the sum, unlike in :func:`variance`.

        Parameters
        ----------
        X : ndarray, shape: [2n+1, n]

            The sigma points, one per row.

        x_mean : ndarray, shape: [n]

            The mean the sigma points were generated from.

        Y : ndarray, shape: [2n+1]

            The images of the sigma points.

        y_mean : float

            The predicted mean, see :func:`mean`.

        Returns
        -------
        P_xy : ndarray, shape: [n]

            The cross-covariance vector.

        """
        X, Y = onp.asarray(X), onp.asarray(Y)
        return self.wi * (X[1:] - x_mean).T @ (Y[1:] - y_mean)
