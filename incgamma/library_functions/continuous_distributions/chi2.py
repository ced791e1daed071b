import numpy as np

from incgamma.lib.utils import is_nan
from incgamma.library_functions.continuous_distributions.gamma import gamma_cdf, gamma_sf

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


def chi2_cdf(x, df, epsilon=None, max_iterations=None):
    r"""The Cumulative Distribution Function of the chi-squared distribution.

    The chi-squared distribution with :math:`\nu` degrees of freedom is a Gamma distribution with shape
    :math:`\nu / 2` and scale 2, such that the CDF is :math:`P(\nu/2, x/2)`.

    Args:
        x (float): the position at which to evaluate the CDF
        df (float): the degrees of freedom, should be positive
        epsilon (float): the convergence threshold
        max_iterations (int): the maximum number of iterations

    Returns:
        float: the probability :math:`\Pr(X \leq x)`, NaN if ``df`` is not positive
    """
    if is_nan(df) or df <= 0:
        return np.nan
    return gamma_cdf(x, df / 2., 2., epsilon, max_iterations)


def chi2_sf(x, df, epsilon=None, max_iterations=None):
    r"""The survival function of the chi-squared distribution, :math:`Q(\nu/2, x/2)`.

    This is what one uses for the p-value of a chi-squared test statistic.

    Args:
        x (float): the position at which to evaluate the survival function
        df (float): the degrees of freedom, should be positive
        epsilon (float): the convergence threshold
        max_iterations (int): the maximum number of iterations

    Returns:
        float: the probability :math:`\Pr(X > x)`, NaN if ``df`` is not positive
    """
    if is_nan(df) or df <= 0:
        return np.nan
    return gamma_sf(x, df / 2., 2., epsilon, max_iterations)
