import logging
from .__version__ import VERSION, VERSION_STATUS, __version__
from .lib.exceptions import ConvergenceError, DivergenceError
from .lib.continued_fraction import ContinuedFraction, evaluate_continued_fraction
from .library_functions import log_gamma, regularized_gamma_p, regularized_gamma_q, erf, erfc, \
    gamma_cdf, gamma_sf, chi2_cdf, chi2_sf, poisson_cdf, poisson_sf

logging.getLogger(__name__).addHandler(logging.NullHandler())
