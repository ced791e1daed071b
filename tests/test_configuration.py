import sys
import unittest

from incgamma import regularized_gamma_p, ConvergenceError
from incgamma.configuration import config_context, RuntimeConfigurationAction, VoidConfigurationAction, \
    EvaluationSettings, get_default_epsilon, get_default_max_iterations, set_default_epsilon, \
    set_default_max_iterations

__author__ = 'The incgamma developers'
__date__ = '2026-10-18'
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


class test_configuration(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(get_default_epsilon(), 1e-15)
        self.assertEqual(get_default_max_iterations(), sys.maxsize)

    def test_config_context(self):
        with config_context(RuntimeConfigurationAction(epsilon=1e-8, max_iterations=50)):
            self.assertEqual(get_default_epsilon(), 1e-8)
            self.assertEqual(get_default_max_iterations(), 50)

        self.assertEqual(get_default_epsilon(), 1e-15)
        self.assertEqual(get_default_max_iterations(), sys.maxsize)

    def test_config_context_restores_on_error(self):
        with self.assertRaises(ConvergenceError):
            with config_context(RuntimeConfigurationAction(max_iterations=1)):
                regularized_gamma_p(5, 3)

        self.assertEqual(get_default_max_iterations(), sys.maxsize)
        self.assertAlmostEqual(regularized_gamma_p(5, 3), 0.18473675547622792, delta=1e-12)

    def test_partial_action(self):
        with config_context(RuntimeConfigurationAction(epsilon=1e-6)):
            self.assertEqual(get_default_epsilon(), 1e-6)
            self.assertEqual(get_default_max_iterations(), sys.maxsize)

    def test_void_action(self):
        with config_context(VoidConfigurationAction()):
            self.assertEqual(get_default_epsilon(), 1e-15)

    def test_invalid_values(self):
        for epsilon in [0, -1e-5, float('nan')]:
            with self.assertRaises(ValueError):
                set_default_epsilon(epsilon)

        with self.assertRaises(ValueError):
            set_default_max_iterations(-1)

        self.assertEqual(get_default_epsilon(), 1e-15)
        self.assertEqual(get_default_max_iterations(), sys.maxsize)


class test_EvaluationSettings(unittest.TestCase):

    def test_uses_configuration(self):
        with config_context(RuntimeConfigurationAction(epsilon=1e-9, max_iterations=123)):
            settings = EvaluationSettings()
            self.assertEqual(settings.epsilon, 1e-9)
            self.assertEqual(settings.max_iterations, 123)

    def test_explicit_values_take_precedence(self):
        with config_context(RuntimeConfigurationAction(epsilon=1e-9, max_iterations=123)):
            settings = EvaluationSettings(epsilon=1e-12, max_iterations=0)
            self.assertEqual(settings.epsilon, 1e-12)
            self.assertEqual(settings.max_iterations, 0)

            self.assertAlmostEqual(regularized_gamma_p(5, 3, max_iterations=1000), 0.18473675547622792, delta=1e-8)
