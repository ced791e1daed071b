from incgamma.library_functions.special_functions import log_gamma
from incgamma.library_functions.regularized_gamma import regularized_gamma_p, regularized_gamma_q
from incgamma.library_functions.error_functions import erf, erfc
from incgamma.library_functions.continuous_distributions.gamma import gamma_cdf, gamma_sf
from incgamma.library_functions.continuous_distributions.chi2 import chi2_cdf, chi2_sf
from incgamma.library_functions.discrete_distributions.poisson import poisson_cdf, poisson_sf


__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'
