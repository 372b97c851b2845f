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

import copy
from collections import namedtuple

import numpy as onp

from .._base.errors import (
    ConfigurationError,
    DimensionMismatchError,
    MissingParameterBufferError,
    NotPositiveDefiniteError,
    ParameterSizeMismatchError,
    StreamFormatError,
)
from .._base.mixins import CopyMixin, LoggerMixin, RandomStateMixin, SerializationMixin
from ..linalg import cholesky_update
from ..unscented import UnscentedWeights, sigma_points as generate_sigma_points
from ..utils import (
    check_array, check_scalar, tokenize, format_float, read_float, read_matrix, read_vector,
    write_matrix, write_vector)


__all__ = (
    'KTD',
    'Hyperparams',
)


Hyperparams = namedtuple('Hyperparams', (
    'gamma', 'eta_noise', 'observation_noise', 'prior_var', 'random_amplitude',
    'ut_alpha', 'ut_beta', 'ut_kappa', 'use_linear_evaluation'))


def _check_hyperparams(hp):
    if not 0 <= hp.gamma <= 1:
        raise ConfigurationError(f"gamma must lie in [0, 1], got: {hp.gamma}")
    if not hp.eta_noise > -1:
        raise ConfigurationError(f"eta_noise must be larger than -1, got: {hp.eta_noise}")
    if not hp.observation_noise >= 0:
        raise ConfigurationError(
            f"observation_noise must be non-negative, got: {hp.observation_noise}")
    if not hp.prior_var > 0:
        raise ConfigurationError(f"prior_var must be positive, got: {hp.prior_var}")
    if not hp.random_amplitude >= 0:
        raise ConfigurationError(
            f"random_amplitude must be non-negative, got: {hp.random_amplitude}")
    if hp.ut_alpha == 0:
        raise ConfigurationError("ut_alpha may not be zero")


class KTD(LoggerMixin, RandomStateMixin, SerializationMixin, CopyMixin):
    r"""

    Kalman Temporal Differences: a Bayesian critic for a parametrized state-action value function
    :math:`q_\theta(s,a)`.

    The critic maintains a Gaussian belief :math:`\mathcal{N}(\theta, LL^\top)` over the parameters
    and updates it after each transition with an unscented Kalman filter step. The observation
    model is the TD residual

    .. math::

        r\ =\ q_\theta(s,a) - I\,\gamma\,q_\theta(s', \cdot) + n

    where :math:`I=0` for terminal transitions, :math:`n\sim\mathcal{N}(0,\sigma^2_\text{obs})`
    and the bootstrap :math:`q_\theta(s', \cdot)` is computed by the ``bootstrap`` strategy.

    The parameter buffer ``theta`` is *borrowed*: the critic writes the posterior mean into it in
    place, so any value function or policy that reads the same array sees the improved parameters
    right after each call to :func:`learn`. Only the critic may write to this buffer, and readers
    must not run concurrently with :func:`learn`.

    Parameters
    ----------
    theta : ndarray, shape: [n]

        The parameter buffer, a writeable one-dimensional float array. It is initialized in place
        with i.i.d. draws from :math:`\mathcal{U}[-a, a]`, where :math:`a` is
        ``random_amplitude``.

    q : callable

        The parametrized value function, with signature :code:`q(theta, s, a) -> float`. It must
        be a pure function of its arguments.

    bootstrap : callable

        The strategy that computes the next-state value for a single sigma point, with signature
        :code:`bootstrap(q, theta_i, s_next, a_next) -> float`. See
        :class:`GreedyBootstrap <ktd.td_learning.GreedyBootstrap>` and
        :class:`OnPolicyBootstrap <ktd.td_learning.OnPolicyBootstrap>`.

    gamma : float between 0 and 1, optional

        The discount factor.

    eta_noise : float, optional

        Process-noise inflation. The covariance factor is scaled by :math:`\sqrt{1+\eta}` before
        each update, which lets the critic track a non-stationary target.

    observation_noise : float, optional

        The variance :math:`\sigma^2_\text{obs}` of the observation noise.

    prior_var : positive float, optional

        The prior variance of each parameter, i.e. :math:`L=\sqrt{\sigma^2_\text{prior}}\,I`
        initially.

    random_amplitude : non-negative float, optional

        The amplitude of the random initialization of ``theta``.

    ut_alpha : float, optional

        The spread of the sigma points, see :class:`UnscentedWeights
        <ktd.unscented.UnscentedWeights>`.

    ut_beta : float, optional

        Prior knowledge about the distribution (2 is optimal for Gaussians).

    ut_kappa : float, optional

        Secondary scaling parameter of the Unscented Transform.

    use_linear_evaluation : bool, optional

        Whether :func:`evaluate` returns :math:`q(\theta,s,a)` at the mean instead of the
        unscented estimate. The two coincide for linear models
        :math:`q(\theta,s,a)=\theta^\top\phi(s,a)`, in which case the former is cheaper.

    random_seed : int, optional

        Seed for the pseudo-random number generator.

    """
    def __init__(
            self, theta, q, bootstrap, gamma=0.9, eta_noise=0., observation_noise=1.,
            prior_var=10., random_amplitude=0., ut_alpha=1e-1, ut_beta=2., ut_kappa=0.,
            use_linear_evaluation=False, random_seed=None):

        if theta is None:
            raise MissingParameterBufferError("a parameter buffer must be provided")
        check_array(theta, ndim=1, dtype_kind='f', writeable=True)
        if theta.shape[0] < 1:
            raise DimensionMismatchError("parameter buffer may not be empty")
        if not callable(q):
            raise TypeError(f"q must be callable, got type: {type(q)}")
        if not callable(bootstrap):
            raise TypeError(f"bootstrap must be callable, got type: {type(bootstrap)}")

        self._hyperparams = Hyperparams(
            gamma=float(gamma),
            eta_noise=float(eta_noise),
            observation_noise=float(observation_noise),
            prior_var=float(prior_var),
            random_amplitude=float(random_amplitude),
            ut_alpha=float(ut_alpha),
            ut_beta=float(ut_beta),
            ut_kappa=float(ut_kappa),
            use_linear_evaluation=bool(use_linear_evaluation))
        _check_hyperparams(self._hyperparams)

        self.q = q
        self.bootstrap = bootstrap
        self.random_seed = random_seed

        n = theta.shape[0]
        self._theta = theta
        self._weights = UnscentedWeights.from_hyperparams(n, ut_alpha, ut_beta, ut_kappa)
        self._L = onp.sqrt(self._hyperparams.prior_var) * onp.eye(n)
        self._sigma_points = onp.zeros((2 * n + 1, n))
        self._theta[:] = self._uniform((n,), self._hyperparams.random_amplitude)

    def __repr__(self):
        return (
            f"{self.__class__.__name__}(n={self.theta_size}, bootstrap={self.bootstrap!r}, "
            f"hyperparams={self._hyperparams})")

    @property
    def hyperparams(self):
        r""" The (immutable) hyperparameters. """
        return self._hyperparams

    @property
    def theta(self):
        r""" The borrowed parameter buffer, holding the posterior mean. """
        return self._theta

    @property
    def theta_size(self):
        r""" The number of parameters :math:`n`. """
        return self._theta.shape[0]

    @property
    def covariance_factor(self):
        r""" The lower-triangular square root :math:`L` of the parameter covariance. """
        return self._L

    @property
    def covariance(self):
        r""" The parameter covariance :math:`LL^\top`. """
        return self._L @ self._L.T

    @property
    def sigma_points(self):
        r"""

        The sigma points of the most recent update, one per row. These are recomputed by every
        call to :func:`learn`.

        """
        return self._sigma_points

    @property
    def weights(self):
        r""" The weights of the Unscented Transform, see :class:`ktd.unscented.UnscentedWeights`. """
        return self._weights

    def learn(self, s, a, r, s_next=None, a_next=None):
        r"""

        Update the belief over the parameters with a single transition.

        Leaving out ``s_next`` marks the transition as terminal, in which case there is no
        bootstrap term.

        Parameters
        ----------
        s : state observation

            A single state observation :math:`S_t`.

        a : action

            A single action :math:`A_t`.

        r : float

            A single reward :math:`R_t`.

        s_next : state observation, optional

            The next-state observation :math:`S_{t+1}`, omit for terminal transitions.

        a_next : action, optional

            The next action :math:`A_{t+1}`. This is required by on-policy bootstraps.

        Returns
        -------
        metrics : dict of scalars

            A dict of diagnostics of the update.

        Raises
        ------
        NotPositiveDefiniteError

            If the covariance downdate breaks positive definiteness. This means that the filter
            has diverged. The belief is left as it was before the call.

        """
        if s_next is None:
            return self._kalman_update(s, a, r, s, a, is_terminal=True)
        return self._kalman_update(s, a, r, s_next, a_next, is_terminal=False)

    def update(self, transition):
        r"""

        Update the belief over the parameters with a single transition.

        Parameters
        ----------
        transition : Transition

            A single transition, see :class:`ktd.reward_tracing.Transition`.

        Returns
        -------
        metrics : dict of scalars

            A dict of diagnostics of the update.

        """
        if transition.done:
            return self.learn(transition.s, transition.a, transition.r)
        return self.learn(
            transition.s, transition.a, transition.r, transition.s_next, transition.a_next)

    def evaluate(self, s, a, return_variance=False):
        r"""

        Evaluate the value function under the current belief.

        Parameters
        ----------
        s : state observation

            A single state observation :math:`s`.

        a : action

            A single action :math:`a`.

        return_variance : bool, optional

            Whether to also return the predictive variance, which is what uncertainty-aware
            policies use as an exploration bonus.

        Returns
        -------
        value : float

            Either :math:`q(\theta,s,a)` (if ``use_linear_evaluation=True``) or the unscented
            estimate :math:`\hat{q}(s,a)=w^{(m)}_0\,q(\theta_0,s,a)+w_i\sum_i q(\theta_i,s,a)`.

        variance : float, optional

            The predictive variance :math:`w^{(c)}_0\,(q_0-v)^2+w_i\sum_i(q_i-v)^2` about the
            returned value :math:`v`. This is only returned if we set ``return_variance=True``.

        """
        linear = self._hyperparams.use_linear_evaluation
        if linear and not return_variance:
            return check_scalar(self.q(self._theta, s, a))

        X = generate_sigma_points(self._theta, self._L, self._weights.scale)
        Y = onp.array([check_scalar(self.q(x, s, a)) for x in X])
        q_pred = float(self._weights.mean(Y))
        value = check_scalar(self.q(self._theta, s, a)) if linear else q_pred

        if return_variance:
            return value, float(self._weights.variance(Y, value))
        return value

    def __call__(self, s, a, return_variance=False):
        return self.evaluate(s, a, return_variance=return_variance)

    def _kalman_update(self, s, a, r, s_next, a_next, is_terminal):
        hp, w = self._hyperparams, self._weights
        r = check_scalar(r)

        # prediction step: the mean is unchanged, the covariance gets inflated
        L = self._L * onp.sqrt(1 + hp.eta_noise)

        # sigma points and their images
        X = generate_sigma_points(self._theta, L, w.scale)
        Y = onp.empty(X.shape[0])
        for i, x in enumerate(X):
            Y[i] = check_scalar(self.q(x, s, a))
            if not is_terminal:
                Y[i] -= hp.gamma * self.bootstrap(self.q, x, s_next, a_next)

        # statistics of interest
        r_pred = float(w.mean(Y))
        P_r = float(w.variance(Y, r_pred)) + hp.observation_noise
        P_theta_r = w.cross_covariance(X, self._theta, Y, r_pred)

        # correction, skipped if the observation carries no information about the parameters
        if P_r == 0:
            K = onp.zeros_like(P_theta_r)
            L_new = L
        else:
            K = P_theta_r / P_r
            try:
                L_new = cholesky_update(L, K, alpha=-P_r, overwrite=True)
            except NotPositiveDefiniteError:
                self.logger.error(
                    "covariance downdate is not positive definite; the filter diverged")
                raise
        self._theta += (r - r_pred) * K
        self._L = L_new
        self._sigma_points[...] = X

        metrics = {
            'td_error': r - r_pred,
            'predicted_reward': r_pred,
            'predicted_variance': P_r,
            'gain_norm': float(onp.linalg.norm(K)),
        }
        self.logger.debug(
            f"td_error: {metrics['td_error']:.4g}, predicted_variance: {P_r:.4g}, "
            f"terminal: {is_terminal}")
        name = self.__class__.__name__
        return {f'{name}/{k}': v for k, v in metrics.items()}

    def __copy__(self):
        # shares the borrowed parameter buffer, owns everything else
        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        new._L = self._L.copy()
        new._sigma_points = self._sigma_points.copy()
        new.q = copy.copy(self.q)
        new.bootstrap = copy.copy(self.bootstrap)
        return new

    def __deepcopy__(self, memo):
        new = self.__copy__()
        new._theta = self._theta.copy()
        memo[id(self)] = new
        return new

    def assign(self, other):
        r"""

        Copy the full state of another critic into this one.

        The parameter values of ``other`` are written into this critic's own buffer, i.e. the
        buffer is not shared between the two critics afterwards.

        Parameters
        ----------
        other : KTD

            The critic to copy from.

        Raises
        ------
        ParameterSizeMismatchError

            If the two critics don't have the same number of parameters.

        """
        if not isinstance(other, KTD):
            raise TypeError(f"can only assign from a KTD instance, got type: {type(other)}")
        if other is self:
            return
        if other.theta_size != self.theta_size:
            raise ParameterSizeMismatchError(
                f"cannot assign a critic with {other.theta_size} parameters to a critic with "
                f"{self.theta_size} parameters")
        self._hyperparams = other._hyperparams
        self._weights = other._weights
        self._theta[:] = other._theta
        self._L = other._L.copy()
        self._sigma_points = other._sigma_points.copy()
        self.q = copy.copy(other.q)
        self.bootstrap = copy.copy(other.bootstrap)

    def write(self, stream, precision=None):
        r"""

        Write the state of the critic to a text stream.

        The format is whitespace-delimited: the three weights ``wm0 wc0 wi``, then the parameter
        vector as ``[ n : ...]``, then the covariance factor and the sigma points as
        ``[ rows x cols : ...]`` (row-major, one sigma point per column).

        Parameters
        ----------
        stream : file-like

            A text stream opened for writing.

        precision : int, optional

            The number of significant digits. If left unspecified, the numbers are written such
            that :func:`read` reproduces them exactly.

        """
        w = self._weights
        stream.write(' '.join(format_float(v, precision) for v in (w.wm0, w.wc0, w.wi)) + ' ')
        write_vector(stream, self._theta, precision)
        write_matrix(stream, self._L, precision)
        write_matrix(stream, self._sigma_points.T, precision)
        self.logger.info(f"wrote {self.__class__.__name__} state ({self.theta_size} parameters)")

    def read(self, stream):
        r"""

        Read the state of the critic from a text stream written by :func:`write`.

        If the encoded parameter vector has the same size as the current buffer, the values are
        written into the buffer in place, so that every reader of the buffer sees the loaded
        parameters. Otherwise all buffers are reallocated to the encoded sizes.

        Parameters
        ----------
        stream : file-like

            A text stream opened for reading.

        """
        tokens = tokenize(stream.read())
        wm0 = read_float(tokens, 'weight wm0')
        wc0 = read_float(tokens, 'weight wc0')
        wi = read_float(tokens, 'weight wi')
        theta = read_vector(tokens, 'parameter vector')
        L = read_matrix(tokens, 'covariance factor')
        X = read_matrix(tokens, 'sigma points')

        n = theta.shape[0]
        if n < 1:
            raise DimensionMismatchError("encoded parameter vector may not be empty")
        check_array(L, shape=(n, n))
        check_array(X, shape=(n, 2 * n + 1))
        weights = UnscentedWeights(wm0, wc0, wi)
        if not wi > 0 or weights.num_points != 2 * n + 1:
            raise StreamFormatError(
                f"weights wm0={wm0}, wi={wi} are inconsistent with {n} encoded parameters")

        if n == self.theta_size:
            self._theta[:] = theta
        else:
            self.logger.warning(
                f"reallocating parameter buffer from size {self.theta_size} to {n}; the buffer "
                "is no longer shared with its previous readers")
            self._theta = theta
        self._weights = weights
        self._L = L
        self._sigma_points = onp.ascontiguousarray(X.T)
        self.logger.info(f"read {self.__class__.__name__} state ({n} parameters)")
