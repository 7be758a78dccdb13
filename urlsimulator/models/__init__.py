from urlsimulator.models.short_url_model import ShortURLModel
from urlsimulator.models.short_url_stats import ShortURLStats


__all__ = [
    'ShortURLModel',
    'ShortURLStats',
]
