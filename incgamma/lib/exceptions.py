__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


class ConvergenceError(Exception):

    def __init__(self, max_iterations, message=None):
        """Raised when an iterative evaluation did not converge within the allowed number of iterations.

        Args:
            max_iterations (int): the number of iterations that was exhausted
            message (str): optional message, if not given a default message mentioning the iterations is used
        """
        if message is None:
            message = 'Failed to converge within {} iterations.'.format(max_iterations)
        super().__init__(message)
        self.max_iterations = max_iterations


class DivergenceError(ConvergenceError):
    """Raised when the convergents of a continued fraction became infinite or NaN."""
