import string
from enum import StrEnum


class Shortcode:
    """Shortcode generation defaults."""

    # Base62 alphabet: 10 digits + 26 uppercase + 26 lowercase
    ALPHABET = string.digits + string.ascii_uppercase + string.ascii_lowercase
    LENGTH = 6
    # Collisions tolerated at one length before the code is widened
    MAX_ATTEMPTS = 100


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        LOG_LEVEL = 'LOG_LEVEL'

    class Shortcode(StrEnum):
        LENGTH = 'SHORTCODE_LENGTH'
        MAX_ATTEMPTS = 'SHORTCODE_MAX_ATTEMPTS'
