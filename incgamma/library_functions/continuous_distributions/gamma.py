import numpy as np

from incgamma.lib.utils import is_nan
from incgamma.library_functions.regularized_gamma import regularized_gamma_p, regularized_gamma_q

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


def gamma_cdf(x, shape, scale, epsilon=None, max_iterations=None):
    r"""Calculate the Cumulative Distribution Function of the Gamma distribution.

    This computes: ``lower_incomplete_gamma(k, x/theta) / gamma(k)``

    With k the shape parameter, theta the scale parameter, lower_incomplete_gamma the lower incomplete gamma
    function and gamma the complete gamma function. The ratio is the lower regularized Gamma function :math:`P`.

    Args:
        x (float): the position at which to evaluate the CDF
        shape (float): the shape parameter :math:`k`, should be positive
        scale (float): the scale parameter :math:`\theta`, should be positive
        epsilon (float): the convergence threshold, see :func:`~incgamma.regularized_gamma_p`
        max_iterations (int): the maximum number of iterations, see :func:`~incgamma.regularized_gamma_p`

    Returns:
        float: the probability :math:`\Pr(X \leq x)`, NaN for invalid parameters
    """
    if is_nan(x, shape, scale) or shape <= 0 or scale <= 0:
        return np.nan
    if x <= 0:
        return 0.0
    return regularized_gamma_p(shape, x / scale, epsilon, max_iterations)


def gamma_sf(x, shape, scale, epsilon=None, max_iterations=None):
    r"""Calculate the survival function (``1 - CDF``) of the Gamma distribution.

    This is the upper regularized Gamma function :math:`Q(k, x / \theta)`, which is more accurate than ``1 - cdf``
    in the upper tail.

    Args:
        x (float): the position at which to evaluate the survival function
        shape (float): the shape parameter :math:`k`, should be positive
        scale (float): the scale parameter :math:`\theta`, should be positive
        epsilon (float): the convergence threshold, see :func:`~incgamma.regularized_gamma_q`
        max_iterations (int): the maximum number of iterations, see :func:`~incgamma.regularized_gamma_q`

    Returns:
        float: the probability :math:`\Pr(X > x)`, NaN for invalid parameters
    """
    if is_nan(x, shape, scale) or shape <= 0 or scale <= 0:
        return np.nan
    if x <= 0:
        return 1.0
    return regularized_gamma_q(shape, x / scale, epsilon, max_iterations)
