import unittest
import numpy as np
from numpy.testing import assert_array_equal

from incgamma.lib.utils import cartesian, is_nan

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


class test_cartesian(unittest.TestCase):

    def test_two_arrays(self):
        assert_array_equal(cartesian(([1, 2], [4, 5])), [[1, 4], [1, 5], [2, 4], [2, 5]])

    def test_three_arrays(self):
        result = cartesian(([1, 2, 3], [4, 5], [6, 7]))
        self.assertEqual(result.shape, (12, 3))
        assert_array_equal(result[0], [1, 4, 6])
        assert_array_equal(result[-1], [3, 5, 7])


class test_is_nan(unittest.TestCase):

    def test_is_nan(self):
        self.assertTrue(is_nan(np.nan))
        self.assertTrue(is_nan(1, np.nan))
        self.assertFalse(is_nan(1, 2.0, np.inf))
