"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for ShortURL DAO implementations,
so the registry does not depend on how records are stored.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Expose the set of shortcodes in use for collision avoidance.
    - Standardize error handling across implementations.

Example:
    Typical usage with the in-memory implementation:

        >>> from urlsimulator.models import ShortURLModel
        >>> from urlsimulator.dao.memory import ShortURLMemoryDAO

        >>> dao = ShortURLMemoryDAO()

        >>> short_url = ShortURLModel(
        ...     target="https://example.com/blog/article-123",
        ...     shortcode="a1b2c3",
        ... )
        >>> dao.insert(short_url)

        >>> retrieved = dao.get("a1b2c3")
        >>> print(retrieved.target)
        https://example.com/blog/article-123

NOTE:
    Records are never deleted. The DAO does not provide a delete interface.
"""

from abc import ABC, abstractmethod

from urlsimulator.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel, **kwargs) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store.
            Raises ShortURLAlreadyExistsError if the shortcode already exists.

        get(shortcode: str, **kwargs) -> ShortURLModel:
            Retrieve a ShortURLModel by shortcode.
            Raises ShortURLNotFoundError if the entry does not exist.

        exists(shortcode: str, **kwargs) -> bool:
            Return True if a ShortURLModel with this shortcode is stored.

        shortcodes(**kwargs) -> frozenset[str]:
            Return a snapshot of every shortcode currently stored.

        count(**kwargs) -> int:
            Return the number of stored short URLs.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel, **kwargs) -> 'ShortURLBaseDAO':
        """Insert a new ShortURLModel into the data store.

        Args:
            short_url (ShortURLModel):
                The ShortURLModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If a ShortURLModel with the same shortcode already exists
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> ShortURLModel:
        """Retrieve a ShortURLModel from the data store by its shortcode.

        Raises:
            ShortURLNotFoundError:
                If no ShortURLModel with the given shortcode exists.
        """
        pass

    @abstractmethod
    def exists(self, shortcode: str, **kwargs) -> bool:
        pass

    @abstractmethod
    def shortcodes(self, **kwargs) -> frozenset[str]:
        pass

    @abstractmethod
    def count(self, **kwargs) -> int:
        pass
