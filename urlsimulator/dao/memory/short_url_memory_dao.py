"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides a dictionary-backed implementation of ShortURLBaseDAO.
State lives for as long as the DAO instance and is lost on exit.

Classes:
    ShortURLMemoryDAO:
        DAO for storing and retrieving ShortURLModel in a process-local dict.

Example:
    >>> from urlsimulator.models import ShortURLModel
    >>> from urlsimulator.dao.memory import ShortURLMemoryDAO

    >>> dao = ShortURLMemoryDAO()
    >>> dao.insert(ShortURLModel(target="https://example.com/page", shortcode="abc123"))
    <ShortURLMemoryDAO>

    >>> dao.get("abc123").target
    'https://example.com/page'
    >>> dao.shortcodes()
    frozenset({'abc123'})
"""

from beartype import beartype

from urlsimulator.models import ShortURLModel
from urlsimulator.dao.base import ShortURLBaseDAO
from urlsimulator.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError


class ShortURLMemoryDAO(ShortURLBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL mappings

    Attributes:
        entries (dict[str, ShortURLModel]):
            Stored short URLs keyed by their shortcode. Every key equals
            `entries[key].shortcode`.
    """

    def __init__(self):
        self.entries: dict[str, ShortURLModel] = {}

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'

    @beartype
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLMemoryDAO':
        """Insert a short URL mapping keyed by its shortcode

        Raises:
            ShortURLAlreadyExistsError:
                If a short URL with the same shortcode already exists.
        """
        if short_url.shortcode in self.entries:
            raise ShortURLAlreadyExistsError(f"Short URL with code '{short_url.shortcode}' already exists.")

        self.entries[short_url.shortcode] = short_url
        return self

    @beartype
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
        """
        try:
            return self.entries[shortcode]
        except KeyError:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from None

    @beartype
    def exists(self, shortcode: str, **kwargs) -> bool:
        return shortcode in self.entries

    def shortcodes(self, **kwargs) -> frozenset[str]:
        return frozenset(self.entries)

    def count(self, **kwargs) -> int:
        return len(self.entries)
