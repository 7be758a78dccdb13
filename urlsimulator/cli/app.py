import sys
import logging
from typing import TextIO

from urlsimulator.registry import ShortURLRegistry
from urlsimulator.exceptions import InvalidURLError, BadConfigurationError
from urlsimulator.dao.exceptions import ShortURLAlreadyExistsError, ShortURLNotFoundError
from urlsimulator.utils import load_config, initialize_logging
from urlsimulator.cli.constants import (
    ADD_URL,
    VISIT_URL,
    VIEW_STATS,
    EXIT,
    MENU,
    CHOOSE_PROMPT,
    URL_PROMPT,
    ALIAS_PROMPT,
    CODE_PROMPT,
    ALIAS_EXISTS_MESSAGE,
    CODE_NOT_FOUND_MESSAGE,
    INVALID_CHOICE_MESSAGE,
    SHORT_URL_CREATED,
    INVALID_URL,
    ALIAS_CONFLICT,
    SHORT_URL_VISITED,
    SHORT_URL_NOT_FOUND,
    INVALID_CHOICE,
)


logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """Raised when the input stream is exhausted while waiting for a line."""


def prompt(message: str, stdin: TextIO, stdout: TextIO) -> str:
    """Write `message` and read one line from `stdin`, without its line terminator.

    Raises:
        EndOfInput: If `stdin` is at EOF.
    """
    stdout.write(message)
    stdout.flush()
    line = stdin.readline()
    if not line:
        raise EndOfInput()
    return line.rstrip('\r\n')


def add_url(registry: ShortURLRegistry, stdin: TextIO, stdout: TextIO) -> None:
    target = prompt(URL_PROMPT, stdin, stdout)
    alias = prompt(ALIAS_PROMPT, stdin, stdout)

    try:
        short_url = registry.create(target, custom_alias=alias)
    except ShortURLAlreadyExistsError as e:
        logger.info('Custom alias already exists.', extra={'alias': alias, 'event': ALIAS_CONFLICT, 'errorCode': e.error_code})
        print(ALIAS_EXISTS_MESSAGE, file=stdout)
    except InvalidURLError as e:
        logger.info('Rejected invalid URL.', extra={'target': target, 'event': INVALID_URL, 'errorCode': e.error_code})
        print(str(e), file=stdout)
    else:
        logger.debug('Short URL created.', extra={'shortcode': short_url.shortcode, 'event': SHORT_URL_CREATED})
        print(f'Short URL created: {short_url.shortcode} -> {short_url.target}', file=stdout)


def visit_url(registry: ShortURLRegistry, stdin: TextIO, stdout: TextIO) -> None:
    shortcode = prompt(CODE_PROMPT, stdin, stdout)

    try:
        short_url = registry.visit(shortcode)
    except ShortURLNotFoundError as e:
        logger.info('Short URL not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND, 'errorCode': e.error_code})
        print(CODE_NOT_FOUND_MESSAGE, file=stdout)
    else:
        logger.debug('Short URL visited.', extra={'shortcode': shortcode, 'event': SHORT_URL_VISITED})
        print(f'Visiting {short_url.target}', file=stdout)


def view_stats(registry: ShortURLRegistry, stdin: TextIO, stdout: TextIO) -> None:
    shortcode = prompt(CODE_PROMPT, stdin, stdout)

    try:
        stats = registry.stats(shortcode)
    except ShortURLNotFoundError as e:
        logger.info('Short URL not found.', extra={'shortcode': shortcode, 'event': SHORT_URL_NOT_FOUND, 'errorCode': e.error_code})
        print(CODE_NOT_FOUND_MESSAGE, file=stdout)
        return

    print(f'Stats for {stats.shortcode} ({stats.target}):', file=stdout)
    print(f'Total visits: {stats.total_visits}', file=stdout)
    for day, hits in stats.daily:
        print(f'{day:%Y-%m-%d}: {hits} hits', file=stdout)


HANDLERS = {
    ADD_URL: add_url,
    VISIT_URL: visit_url,
    VIEW_STATS: view_stats,
}


def run(registry: ShortURLRegistry, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Run the interactive menu until the user exits or input ends

    Every request is handled to completion before the next menu is shown.
    Domain errors are reported to the user and never end the loop.

    Args:
        registry (ShortURLRegistry):
            Registry owned by this control loop.
        stdin (TextIO):
            Line-oriented input stream, sys.stdin by default.
        stdout (TextIO):
            Output stream for menus, prompts and results, sys.stdout by default.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> run(ShortURLRegistry(), io.StringIO('2\\nnope\\n4\\n'), out)
        >>> 'Code not found.' in out.getvalue()
        True
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        print(MENU, file=stdout)
        try:
            choice = prompt(CHOOSE_PROMPT, stdin, stdout)
            if choice == EXIT:
                return

            handler = HANDLERS.get(choice)
            if handler is None:
                logger.debug('Invalid menu choice.', extra={'choice': choice, 'event': INVALID_CHOICE})
                print(INVALID_CHOICE_MESSAGE, file=stdout)
                continue

            handler(registry, stdin, stdout)
        except EndOfInput:
            logger.debug('Input stream closed. Exiting.')
            return


def main() -> int:
    """Console entry point: configure logging, build the registry and run the menu."""
    try:
        initialize_logging()
        config = load_config()
    except BadConfigurationError as e:
        logger.error('Invalid configuration.', extra={'errorCode': e.error_code})
        print(str(e), file=sys.stderr)
        return 1

    run(ShortURLRegistry(config=config))
    return 0
