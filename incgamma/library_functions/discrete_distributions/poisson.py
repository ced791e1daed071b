import numpy as np

from incgamma.lib.utils import is_nan
from incgamma.library_functions.regularized_gamma import regularized_gamma_p, regularized_gamma_q

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


def poisson_cdf(k, rate, epsilon=None, max_iterations=None):
    r"""The Cumulative Distribution Function of the Poisson distribution.

    .. math::

        F(k; \lambda) = Q(\lfloor k \rfloor + 1, \lambda)

    where :math:`Q` is the upper regularized Gamma function.

    Args:
        k (float): the number of events, non-integer values are floored
        rate (float): the rate (mean) :math:`\lambda`, should be non-negative
        epsilon (float): the convergence threshold
        max_iterations (int): the maximum number of iterations

    Returns:
        float: the probability :math:`\Pr(X \leq k)`, NaN for a negative or NaN rate
    """
    if is_nan(k, rate) or rate < 0:
        return np.nan
    if k < 0:
        return 0.0
    if rate == 0:
        return 1.0
    return regularized_gamma_q(np.floor(k) + 1, rate, epsilon, max_iterations)


def poisson_sf(k, rate, epsilon=None, max_iterations=None):
    r"""The survival function of the Poisson distribution, :math:`\Pr(X > k) = P(\lfloor k \rfloor + 1, \lambda)`.

    Args:
        k (float): the number of events, non-integer values are floored
        rate (float): the rate (mean) :math:`\lambda`, should be non-negative
        epsilon (float): the convergence threshold
        max_iterations (int): the maximum number of iterations

    Returns:
        float: the probability :math:`\Pr(X > k)`, NaN for a negative or NaN rate
    """
    if is_nan(k, rate) or rate < 0:
        return np.nan
    if k < 0:
        return 1.0
    if rate == 0:
        return 0.0
    return regularized_gamma_p(np.floor(k) + 1, rate, epsilon, max_iterations)
