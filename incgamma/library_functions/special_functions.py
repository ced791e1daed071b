from scipy.special import gammaln

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


def log_gamma(a):
    r"""Computes the natural logarithm of the absolute value of the Gamma function, :math:`\ln |\Gamma(a)|`.

    Args:
        a (float): the argument

    Returns:
        float: the log of the Gamma function evaluated at ``a``
    """
    return float(gammaln(a))
