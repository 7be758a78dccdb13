"""Utility functions for application configuration management.

The simulator is configured exclusively through environment variables:

    APP_ENV                 – application environment, `'local'` by default.
    APP_NAME                – application name, `'urlsimulator'` by default.
    SHORTCODE_LENGTH        – length of generated shortcodes (default: 6).
    SHORTCODE_MAX_ATTEMPTS  – collisions tolerated at one length before
                              generated shortcodes are widened (default: 100).

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str
        Return the application name (`APP_NAME`).

    load_config() -> SimulatorConfig
        Parse shortcode settings from the environment.

Example:
    >>> from urlsimulator.utils.config import load_config
    >>> config = load_config()
    >>> config.shortcode_length
    6
"""

import os
import logging
from dataclasses import dataclass

from urlsimulator.constants import ENV, Shortcode
from urlsimulator.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulatorConfig:
    """Runtime settings for shortcode generation.

    Attributes:
        shortcode_length (int):
            Length of randomly generated shortcodes.
        max_attempts (int):
            Collisions tolerated at one length before widening the code.
    """

    shortcode_length: int = Shortcode.LENGTH
    max_attempts: int = Shortcode.MAX_ATTEMPTS


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str:
    """Return the current application name by reading 'APP_NAME'"""
    return os.environ.get(ENV.App.APP_NAME, 'urlsimulator')


def _positive_int_from_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {raw!r}).") from e

    if value <= 0:
        raise BadConfigurationError(f"Environment variable '{name}' must be positive (given value: {value}).")
    return value


def load_config() -> SimulatorConfig:
    """Load simulator configuration from environment variables

    Returns:
        SimulatorConfig: parsed configuration, with defaults for unset variables.

    Raises:
        BadConfigurationError:
            If a variable is set to a non-integer or non-positive value.

    Example:
        >>> os.environ['SHORTCODE_LENGTH'] = '8'
        >>> load_config().shortcode_length
        8
    """
    config = SimulatorConfig(
        shortcode_length=_positive_int_from_env(ENV.Shortcode.LENGTH, Shortcode.LENGTH),
        max_attempts=_positive_int_from_env(ENV.Shortcode.MAX_ATTEMPTS, Shortcode.MAX_ATTEMPTS),
    )
    logger.debug(
        'Loaded simulator configuration.',
        extra={'appName': app_name(), 'appEnv': app_env(), 'shortcodeLength': config.shortcode_length},
    )
    return config
