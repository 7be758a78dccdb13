"""Shortcode generation utility

This module provides helper functions for generating random Base62 shortcodes
and for picking a shortcode that is not already taken.

Functions:
    generate_random_code(length=6) -> str:
        Draw a random Base62 string of the given length.
    generate_unique_code(existing_codes, length=6, max_attempts=100) -> str:
        Draw random codes until one is not a member of `existing_codes`.

Example:
    >>> from urlsimulator.utils import generate_unique_code
    >>> generate_unique_code({'aB3xQ9'})
    'Zr81Kd'
"""

import logging
import secrets
from collections.abc import Collection

from beartype import beartype

from urlsimulator.constants import Shortcode


logger = logging.getLogger(__name__)

ALPHABET = Shortcode.ALPHABET
BASE = len(ALPHABET)  # 10 digits + 26 uppercase + 26 lowercase


@beartype
def generate_random_code(length: int = Shortcode.LENGTH) -> str:
    """Generate a random Base62 shortcode.

    Every character is drawn independently and uniformly from the alphabet
    `0-9A-Za-z`.

    Args:
        length (int, optional):
            Number of characters in the resulting code.
            Defaults to 6.

    Returns:
        str: A random alphanumeric code of exactly `length` characters.

    Raises:
        ValueError: If `length` is not a positive integer.

    Example:
        >>> generate_random_code(6)
        'aB3xQ9'
    """
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


@beartype
def generate_unique_code(
    existing_codes: Collection[str],
    length: int = Shortcode.LENGTH,
    max_attempts: int = Shortcode.MAX_ATTEMPTS,
) -> str:
    """Generate a random shortcode that is not present in `existing_codes`.

    Codes are drawn at `length` characters until one misses `existing_codes`.
    After `max_attempts` consecutive collisions the code is widened by one
    character and drawing continues, so the function never gives up for a
    finite set of existing codes.

    Args:
        existing_codes (Collection[str]):
            Shortcodes already in use.

        length (int, optional):
            Starting code length. Defaults to 6.

        max_attempts (int, optional):
            Collisions tolerated at a single length before widening.
            Defaults to 100.

    Returns:
        str: A shortcode not contained in `existing_codes`.

    Raises:
        ValueError: If `length` or `max_attempts` is not positive.

    Example:
        >>> generate_unique_code({'000000'}, length=6)
        'k2Pq7Z'
    """
    if max_attempts <= 0:
        raise ValueError(f'Max attempts must be a positive integer (given value: {max_attempts}).')

    while True:
        for _ in range(max_attempts):
            code = generate_random_code(length)
            if code not in existing_codes:
                return code

        logger.warning(
            'Shortcode space is crowded. Widening shortcode length.',
            extra={'length': length, 'newLength': length + 1, 'maxAttempts': max_attempts},
        )
        length += 1
