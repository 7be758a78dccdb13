from dataclasses import dataclass
from datetime import date


# fmt: off
@dataclass(frozen=True)
class ShortURLStats:
    shortcode: str                  # Short identifier the stats were requested for
    target: str                     # Original long URL
    total_visits: int               # Number of recorded visits
    daily: list[tuple[date, int]]   # (UTC date, visit count) pairs, ascending by date
# fmt: on
