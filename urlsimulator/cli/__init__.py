from urlsimulator.cli.app import main, run


__all__ = [
    'main',
    'run',
]
