"""Contains the runtime configuration of incgamma.

This consists of two parts, functions to get the current runtime settings and configuration actions to update these
settings. The settings are only the defaults used when a function is called without an explicit ``epsilon`` or
``max_iterations``. To set a new configuration, create a new :py:class:`ConfigAction` and use this within a context
environment using :py:func:`config_context`. Example:

.. code-block:: python

    from incgamma.configuration import RuntimeConfigurationAction, config_context

    with config_context(RuntimeConfigurationAction(epsilon=1e-12)):
        ...

"""
import logging
import sys
from contextlib import contextmanager
import numpy as np

__author__ = 'The incgamma developers'
__date__ = "2026-10-18"
__maintainer__ = 'The incgamma developers'
__licence__ = 'LGPL v3'


_logger = logging.getLogger(__name__)

"""The runtime configuration, this can be overwritten at run time.

This entire module acts as a singleton containing the current runtime configuration.
"""
_config = {
    'epsilon': 1e-15,
    'max_iterations': sys.maxsize
}


def get_default_epsilon():
    """Get the default convergence threshold used by the series and continued fraction evaluations.

    Returns:
        float: the current default epsilon
    """
    return _config['epsilon']


def set_default_epsilon(epsilon):
    """Set the default convergence threshold.

    Please note that this will change the global configuration, i.e. this is a persistent change. If you do not want
    a persistent state change, consider using :func:`~incgamma.configuration.config_context` instead.

    Args:
        epsilon (float): the new default epsilon, should be strictly positive

    Raises:
        ValueError: if the epsilon is not a positive number
    """
    if np.isnan(epsilon) or epsilon <= 0:
        raise ValueError('The epsilon should be a positive number, {} given.'.format(epsilon))
    _logger.debug('Setting the default epsilon to {}.'.format(epsilon))
    _config['epsilon'] = epsilon


def get_default_max_iterations():
    """Get the default maximum number of iterations.

    Returns:
        int: the current default maximum number of iterations
    """
    return _config['max_iterations']


def set_default_max_iterations(max_iterations):
    """Set the default maximum number of iterations.

    Please note that this will change the global configuration, i.e. this is a persistent change. If you do not want
    a persistent state change, consider using :func:`~incgamma.configuration.config_context` instead.

    Args:
        max_iterations (int): the new default, should be zero or larger

    Raises:
        ValueError: if the number of iterations is negative
    """
    if max_iterations < 0:
        raise ValueError('The maximum number of iterations should be non-negative, {} given.'.format(max_iterations))
    _logger.debug('Setting the default maximum number of iterations to {}.'.format(max_iterations))
    _config['max_iterations'] = int(max_iterations)


@contextmanager
def config_context(config_action):
    """Creates a context in which the config action is applied and unapplies the configuration after execution.

    Args:
        config_action (ConfigAction): the configuration action to use
    """
    config_action.apply()
    try:
        yield
    finally:
        config_action.unapply()


class ConfigAction:

    def __init__(self):
        """Defines a configuration action for use in a configuration context.

        This should define an apply and unapply function that sets and unsets the configuration options.

        The applying action needs to remember the state before the application of the action.
        """

    def apply(self):
        """Apply the current action to the current runtime configuration."""

    def unapply(self):
        """Reset the current configuration to the previous state."""


class SimpleConfigAction(ConfigAction):

    def __init__(self):
        """Defines a default implementation of a configuration action.

        This simple config implements a default ``apply()`` method that saves the current state and a default
        ``unapply()`` that restores the previous state.

        For developers, it is easiest to implement ``_apply()`` such that you do not manually need to store the old
        configuration.
        """
        super().__init__()
        self._old_config = {}

    def apply(self):
        """Apply the current action to the current runtime configuration."""
        self._old_config = {k: v for k, v in _config.items()}
        self._apply()

    def unapply(self):
        """Reset the current configuration to the previous state."""
        for key, value in self._old_config.items():
            _config[key] = value

    def _apply(self):
        """Implement this function add apply() logic after this class saves the current config."""


class RuntimeConfigurationAction(SimpleConfigAction):

    def __init__(self, epsilon=None, max_iterations=None):
        """Updates the runtime settings.

        Args:
            epsilon (float): the new default convergence threshold
            max_iterations (int): the new default maximum number of iterations
        """
        super().__init__()
        self._epsilon = epsilon
        self._max_iterations = max_iterations

    def _apply(self):
        if self._epsilon is not None:
            set_default_epsilon(self._epsilon)

        if self._max_iterations is not None:
            set_default_max_iterations(self._max_iterations)


class VoidConfigurationAction(ConfigAction):

    def __init__(self):
        """Does nothing, useful as a default config action.
        """
        super().__init__()


class EvaluationSettings:

    def __init__(self, epsilon=None, max_iterations=None):
        """The convergence settings of a single evaluation.

        Args:
            epsilon (float): the convergence threshold. If None is given we use the default in the current
                configuration.
            max_iterations (int): the maximum number of iterations. If None is given we use the default in the
                current configuration.
        """
        self._epsilon = epsilon
        self._max_iterations = max_iterations

        if self._epsilon is None:
            self._epsilon = get_default_epsilon()

        if self._max_iterations is None:
            self._max_iterations = get_default_max_iterations()

    @property
    def epsilon(self):
        return self._epsilon

    @property
    def max_iterations(self):
        return self._max_iterations
