from urlsimulator.utils.config import app_env, app_name, load_config, SimulatorConfig
from urlsimulator.utils.helpers import utc_today, is_blank
from urlsimulator.utils.shortener import generate_random_code, generate_unique_code
from urlsimulator.utils.logging import initialize_logging


__all__ = [
    'generate_random_code',
    'generate_unique_code',
    'app_env',
    'app_name',
    'load_config',
    'SimulatorConfig',
    'utc_today',
    'is_blank',
    'initialize_logging',
]
