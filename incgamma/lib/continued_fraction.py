"""Generic evaluation of continued fractions.

A continued fraction is here written as:

.. math::

    a_0(x) + \\frac{b_1(x)}{a_1(x) + \\frac{b_2(x)}{a_2(x) + \\cdots}}

where the :math:`a_n` are the denominator terms and the :math:`b_n` the numerator terms. The value is computed with the
modified Lentz algorithm, see:

* W. J. Lentz, "Generating Bessel functions in Mie scattering calculations using continued fractions",
  Applied Optics, 15(3), 668-671, 1976.
* I. J. Thompson and A. R. Barnett, "Coulomb and Bessel functions of complex arguments and order",
  Journal of Computational Physics, 64(2), 490-509, 1986.
"""
import logging
import numpy as np

from incgamma.lib.exceptions import ConvergenceError, DivergenceError

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


_SMALL = 1e-50
"""Replacement for (near) zero intermediate values in the Lentz recursion."""

_logger = logging.getLogger(__name__)


def evaluate_continued_fraction(get_numerator, get_denominator, x, epsilon, max_iterations):
    """Evaluate a continued fraction using the modified Lentz algorithm.

    The numerator function is only called for ``n >= 1``, the denominator function for ``n >= 0`` where the term
    at ``n == 0`` is the leading term of the fraction.

    Args:
        get_numerator (Callable[[int, float], float]): returns the numerator term :math:`b_n(x)`
        get_denominator (Callable[[int, float], float]): returns the denominator term :math:`a_n(x)`
        x (float): the argument at which to evaluate the fraction
        epsilon (float): we stop when the relative change of the convergent, :math:`|\\Delta_n - 1|`, drops
            below this value
        max_iterations (int): the maximum number of terms to evaluate

    Returns:
        float: the value of the continued fraction

    Raises:
        DivergenceError: if a convergent becomes infinite or NaN
        ConvergenceError: if the fraction did not converge within ``max_iterations`` terms
    """
    h_prev = float(get_denominator(0, x))
    if abs(h_prev) <= _SMALL:
        h_prev = _SMALL

    n = 1
    d_prev = 0.0
    c_prev = h_prev
    h_n = h_prev

    while n <= max_iterations:
        a = float(get_denominator(n, x))
        b = float(get_numerator(n, x))

        d_n = a + b * d_prev
        if abs(d_n) <= _SMALL:
            d_n = _SMALL

        c_n = a + b / c_prev
        if abs(c_n) <= _SMALL:
            c_n = _SMALL

        d_n = 1 / d_n
        delta_n = c_n * d_n
        h_n = h_prev * delta_n

        if np.isinf(h_n):
            raise DivergenceError(max_iterations, 'Continued fraction convergents diverged to infinity '
                                                  'for value {}.'.format(x))
        if np.isnan(h_n):
            raise DivergenceError(max_iterations, 'Continued fraction diverged to NaN for value {}.'.format(x))

        if abs(delta_n - 1) < epsilon:
            break

        d_prev = d_n
        c_prev = c_n
        h_prev = h_n
        n += 1

    if n > max_iterations:
        _logger.debug('Continued fraction at {} did not converge within {} iterations.'.format(x, max_iterations))
        raise ConvergenceError(max_iterations)

    return h_n


class ContinuedFraction:

    def __init__(self, get_numerator, get_denominator):
        """A continued fraction defined by its term functions, evaluable at many arguments.

        Args:
            get_numerator (Callable[[int, float], float]): returns the numerator term :math:`b_n(x)` for ``n >= 1``
            get_denominator (Callable[[int, float], float]): returns the denominator term :math:`a_n(x)`
                for ``n >= 0``
        """
        self._get_numerator = get_numerator
        self._get_denominator = get_denominator

    def evaluate(self, x, epsilon, max_iterations):
        """Evaluate this continued fraction at the given argument.

        See :func:`evaluate_continued_fraction` for the arguments and the exceptions raised.
        """
        return evaluate_continued_fraction(self._get_numerator, self._get_denominator, x, epsilon, max_iterations)
