class URLSimulatorError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:url_simulator_error'


class InvalidURLError(URLSimulatorError, ValueError):
    """Raised when a target URL does not start with http:// or https://."""

    error_code = 'app:invalid_url_error'


class ConfigurationError(URLSimulatorError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
