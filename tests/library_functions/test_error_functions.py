import unittest
import numpy as np
from numpy.testing import assert_allclose
from scipy import special

from incgamma import erf, erfc

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


class test_ErrorFunctions(unittest.TestCase):

    def test_erf(self):
        xs = np.arange(-6, 6, 0.05)
        assert_allclose([erf(x) for x in xs], special.erf(xs), atol=1e-14, rtol=1e-12)

    def test_erfc(self):
        xs = np.arange(-6, 6, 0.05)
        assert_allclose([erfc(x) for x in xs], special.erfc(xs), atol=1e-14, rtol=1e-10)

    def test_erfc_tail(self):
        xs = np.array([4, 8, 12, 20, 26])
        assert_allclose([erfc(x) for x in xs], special.erfc(xs), rtol=1e-10)

    def test_symmetry(self):
        for x in [0.1, 0.7, 2, 3.3]:
            self.assertEqual(erf(-x), -erf(x))
            self.assertAlmostEqual(erfc(-x), 2 - erfc(x), delta=1e-15)

    def test_saturation(self):
        self.assertEqual(erf(41), 1)
        self.assertEqual(erf(-41), -1)
        self.assertEqual(erfc(41), 0)
        self.assertEqual(erfc(-41), 2)
        self.assertEqual(erf(np.inf), 1)
        self.assertEqual(erfc(-np.inf), 2)

    def test_special_values(self):
        self.assertEqual(erf(0), 0)
        self.assertEqual(erfc(0), 1)
        self.assertTrue(np.isnan(erf(np.nan)))
        self.assertTrue(np.isnan(erfc(np.nan)))
