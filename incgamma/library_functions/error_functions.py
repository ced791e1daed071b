import numpy as np

from incgamma.library_functions.regularized_gamma import regularized_gamma_p, regularized_gamma_q

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


_EPSILON = 1e-15
_MAX_ITERATIONS = 10000

_SATURATION_LIMIT = 40
"""Beyond this absolute argument erf is 1 in double precision."""


def erf(x):
    r"""Computes the error function.

    This uses the identity :math:`\mathrm{erf}(x) = \mathrm{sign}(x) P(\frac{1}{2}, x^2)`, with :math:`P` the lower
    regularized Gamma function.

    Args:
        x (float): the argument

    Returns:
        float: the error function evaluated at ``x``

    Raises:
        ConvergenceError: if the underlying Gamma evaluation did not converge
    """
    if np.isnan(x):
        return np.nan
    if abs(x) > _SATURATION_LIMIT:
        return 1.0 if x > 0 else -1.0

    ret = regularized_gamma_p(0.5, x * x, _EPSILON, _MAX_ITERATIONS)
    return -ret if x < 0 else ret


def erfc(x):
    r"""Computes the complementary error function, :math:`\mathrm{erfc}(x) = 1 - \mathrm{erf}(x)`.

    For non-negative arguments this is :math:`Q(\frac{1}{2}, x^2)`, which keeps full relative precision in the tail
    where ``1 - erf(x)`` would cancel to zero.

    Args:
        x (float): the argument

    Returns:
        float: the complementary error function evaluated at ``x``

    Raises:
        ConvergenceError: if the underlying Gamma evaluation did not converge
    """
    if np.isnan(x):
        return np.nan
    if abs(x) > _SATURATION_LIMIT:
        return 0.0 if x > 0 else 2.0

    ret = regularized_gamma_q(0.5, x * x, _EPSILON, _MAX_ITERATIONS)
    return 2 - ret if x < 0 else ret
