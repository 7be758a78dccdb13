"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` from the entry point before any other
logging is done.

The menu, prompts and results own stdout, so records go to stderr. The default
level is `WARNING` because every recoverable user error (bad URL, unknown code)
is logged at INFO and would otherwise echo each menu answer on the terminal.
Set `LOG_LEVEL` (DEBUG, INFO, WARNING, ERROR, CRITICAL) to change it; any other
value raises BadConfigurationError.

Logging format:
{
    "timestamp": "2025-12-26T12:00:00.000Z",
    "level": "INFO",
    "logger": "urlsimulator.registry",
    "message": "Short URL created.",
    "shortcode": "aB3xQ9"
}
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlsimulator.constants import ENV
from urlsimulator.exceptions import BadConfigurationError


LOG_LEVELS = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    STANDARD_ATTRS = frozenset(
        {
            'args',
            'asctime',
            'created',
            'exc_info',
            'exc_text',
            'filename',
            'funcName',
            'levelname',
            'levelno',
            'lineno',
            'module',
            'msecs',
            'msg',
            'name',
            'pathname',
            'process',
            'processName',
            'relativeCreated',
            'stack_info',
            'thread',
            'threadName',
            'taskName',
        }
    )

    def format(self, record: logging.LogRecord) -> str:
        # fmt: off
        timestamp = datetime.fromtimestamp(record.created, tz=UTC) \
                            .isoformat(timespec="milliseconds") \
                            .replace("+00:00", "Z")
        # fmt: on

        log = {
            'timestamp': timestamp,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        for key, value in record.__dict__.items():
            if key not in self.STANDARD_ATTRS:
                log[key] = value

        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


def initialize_logging() -> None:
    log_level = (os.getenv(ENV.App.LOG_LEVEL) or 'WARNING').strip().upper()
    if log_level not in LOG_LEVELS:
        raise BadConfigurationError(f"Environment variable '{ENV.App.LOG_LEVEL}' must be one of {sorted(LOG_LEVELS)} (given value: {log_level!r}).")

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': {
                'stderr': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stderr',
                }
            },
            'root': {
                'level': log_level,
                'handlers': ['stderr'],
            },
        }
    )
