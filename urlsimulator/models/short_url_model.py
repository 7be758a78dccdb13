import re
from collections import Counter
from collections.abc import Collection
from dataclasses import dataclass, field
from datetime import date

from urlsimulator.constants import Shortcode
from urlsimulator.exceptions import InvalidURLError
from urlsimulator.utils.helpers import utc_today, is_blank
from urlsimulator.utils.shortener import generate_unique_code


URL_PATTERN = re.compile(r'^https?://', re.IGNORECASE)


def validate_target(target: str) -> str:
    """Return `target` unchanged, or raise InvalidURLError if it is not an http(s) URL."""
    if not isinstance(target, str) or not URL_PATTERN.match(target):
        raise InvalidURLError('Invalid URL. Must start with http:// or https://')
    return target


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping and its visit log.

    `target` and `shortcode` are frozen after construction. `visits` is an
    append-only log of the UTC calendar dates on which the link was visited.

    Attributes:
        target (str):
            The original long URL. Must start with http:// or https://
            (case-insensitive).
        shortcode (str):
            The unique short identifier representing the shortened URL.
        visits (list[date]):
            One UTC date per visit, in visit order.

    Example:
        >>> url = ShortURLModel.create('https://example.com/article/123', custom_code='abc123')
        >>> url.shortcode
        'abc123'
        >>> url.visit()
        >>> url.total_visits
        1
        >>> ShortURLModel(target='ftp://example.com', shortcode='abc123')
        Traceback (most recent call last):
            ...
        urlsimulator.exceptions.InvalidURLError: Invalid URL. Must start with http:// or https://
    """

    target: str
    shortcode: str
    visits: list[date] = field(default_factory=list, compare=False)

    def __post_init__(self):
        validate_target(self.target)

    @classmethod
    def create(
        cls,
        target: str,
        custom_code: str | None = None,
        existing_codes: Collection[str] | None = None,
        length: int = Shortcode.LENGTH,
        max_attempts: int = Shortcode.MAX_ATTEMPTS,
    ) -> 'ShortURLModel':
        """Build a short URL, generating a shortcode unless a custom one is given.

        A non-blank `custom_code` is used verbatim. Uniqueness of custom codes
        is the caller's concern.

        Raises:
            InvalidURLError: If `target` does not start with http:// or https://.
        """
        validate_target(target)

        if is_blank(custom_code):
            shortcode = generate_unique_code(existing_codes or set(), length=length, max_attempts=max_attempts)
        else:
            shortcode = custom_code
        return cls(target=target, shortcode=shortcode)

    def visit(self) -> None:
        """Record a visit on the current UTC date."""
        self.visits.append(utc_today())

    @property
    def total_visits(self) -> int:
        return len(self.visits)

    @property
    def daily_stats(self) -> dict[date, int]:
        """Visit counts grouped by UTC date (unordered)."""
        return dict(Counter(self.visits))
