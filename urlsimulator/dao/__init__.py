from urlsimulator.dao.base import ShortURLBaseDAO
from urlsimulator.dao.memory import ShortURLMemoryDAO


__all__ = [
    'ShortURLBaseDAO',
    'ShortURLMemoryDAO',
]
