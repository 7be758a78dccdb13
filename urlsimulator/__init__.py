from urlsimulator.registry import ShortURLRegistry
from urlsimulator.models import ShortURLModel, ShortURLStats


__all__ = [
    'ShortURLRegistry',
    'ShortURLModel',
    'ShortURLStats',
]
