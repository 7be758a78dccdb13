"""Short URL registry: the code-to-record store and its operations

The registry is explicitly constructed and owned by its caller (e.g. the
interactive control loop). It enforces alias rules on creation and dispatches
visit and stats queries to the stored records.

Classes:
    ShortURLRegistry:
        Create, visit and report on short URLs.

Example:
    >>> from urlsimulator.registry import ShortURLRegistry
    >>> registry = ShortURLRegistry()
    >>> short_url = registry.create('https://example.com', custom_alias='docs')
    >>> registry.visit('docs').target
    'https://example.com'
    >>> registry.stats('docs').total_visits
    1
"""

import logging

from urlsimulator.models import ShortURLModel, ShortURLStats
from urlsimulator.dao.base import ShortURLBaseDAO
from urlsimulator.dao.memory import ShortURLMemoryDAO
from urlsimulator.dao.exceptions import ShortURLAlreadyExistsError
from urlsimulator.utils.config import SimulatorConfig
from urlsimulator.utils.helpers import is_blank


logger = logging.getLogger(__name__)


class ShortURLRegistry:
    """Code-to-record store with create/visit/stats operations.

    Attributes:
        dao (ShortURLBaseDAO):
            Storage for short URL records. Defaults to a fresh ShortURLMemoryDAO.
        config (SimulatorConfig):
            Shortcode generation settings.

    Methods:
        create(target: str, custom_alias: str | None = None) -> ShortURLModel:
            Register a new short URL.
            Raises AliasConflictError if a non-blank alias is already taken.
            Raises InvalidURLError if the target URL is malformed.

        visit(shortcode: str) -> ShortURLModel:
            Record a visit and return the visited short URL.
            Raises ShortURLNotFoundError for unknown shortcodes.

        stats(shortcode: str) -> ShortURLStats:
            Report total visits and per-day counts sorted by date.
            Raises ShortURLNotFoundError for unknown shortcodes.
    """

    def __init__(self, dao: ShortURLBaseDAO | None = None, config: SimulatorConfig | None = None):
        self.dao = dao if dao is not None else ShortURLMemoryDAO()
        self.config = config if config is not None else SimulatorConfig()

    def __len__(self) -> int:
        return self.dao.count()

    def __contains__(self, shortcode: object) -> bool:
        return isinstance(shortcode, str) and self.dao.exists(shortcode)

    def codes(self) -> frozenset[str]:
        return self.dao.shortcodes()

    def create(self, target: str, custom_alias: str | None = None) -> ShortURLModel:
        """Register a new short URL

        The alias check runs before the record is built, and the record is
        stored only after it was built successfully, so a failed creation
        leaves the registry unchanged.

        Args:
            target (str):
                Original URL, must start with http:// or https://.
            custom_alias (str | None):
                Optional shortcode to use instead of a generated one.
                Blank values are treated as absent.

        Returns:
            ShortURLModel: the newly stored short URL.

        Raises:
            AliasConflictError:
                If `custom_alias` is non-blank and already in use.
            InvalidURLError:
                If `target` does not start with http:// or https://.
        """
        if not is_blank(custom_alias) and self.dao.exists(custom_alias):
            raise ShortURLAlreadyExistsError(f"Custom alias '{custom_alias}' already exists.")

        short_url = ShortURLModel.create(
            target,
            custom_code=custom_alias,
            existing_codes=self.dao.shortcodes(),
            length=self.config.shortcode_length,
            max_attempts=self.config.max_attempts,
        )
        self.dao.insert(short_url)

        logger.info(
            'Short URL created.',
            extra={'shortcode': short_url.shortcode, 'target': short_url.target, 'customAlias': not is_blank(custom_alias)},
        )
        return short_url

    def visit(self, shortcode: str) -> ShortURLModel:
        """Record a visit for `shortcode` and return its short URL.

        Raises:
            ShortURLNotFoundError: If `shortcode` is unknown.
        """
        short_url = self.dao.get(shortcode)
        short_url.visit()
        logger.debug('Short URL visited.', extra={'shortcode': shortcode, 'totalVisits': short_url.total_visits})
        return short_url

    def stats(self, shortcode: str) -> ShortURLStats:
        """Report visit statistics for `shortcode`.

        Raises:
            ShortURLNotFoundError: If `shortcode` is unknown.
        """
        short_url = self.dao.get(shortcode)
        return ShortURLStats(
            shortcode=short_url.shortcode,
            target=short_url.target,
            total_visits=short_url.total_visits,
            daily=sorted(short_url.daily_stats.items()),
        )
