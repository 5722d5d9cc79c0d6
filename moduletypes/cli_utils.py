"""
Common CLI utilities and decorators for consistent command behavior.
"""

import sys
import click
import logging
from functools import wraps
from .exit_codes import (
    SUCCESS, INTERRUPTED,
    get_exit_code_for_exception, CommandError
)
from .output import emit, emit_error

logger = logging.getLogger("moduletypes")


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Clean JSONL (or --pretty table) output on stdout
    - --verbose/-v switches logging to DEBUG
    - --quiet/-q suppresses data output
    - Consistent error handling and exit codes

    The wrapped command returns the items to emit, or None if it
    handles its own output.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        verbose = kwargs.get('verbose', False)
        quiet = kwargs.get('quiet', False)
        pretty = kwargs.get('pretty', False)

        if verbose:
            logger.setLevel(logging.DEBUG)

        try:
            result = func(*args, **kwargs)

            if result is not None:
                if quiet:
                    # Consume lazily produced results without output
                    for _ in result:
                        pass
                else:
                    emit(result, pretty=pretty)

            sys.exit(SUCCESS)

        except KeyboardInterrupt:
            logger.error("Interrupted by user")
            sys.exit(INTERRUPTED)
        except click.ClickException:
            # Click exceptions already have their exit code
            raise
        except CommandError as e:
            logger.debug(f"Command failed: {e}")
            context = {"exit_code": e.exit_code}
            if getattr(e, 'missing', None):
                context['missing'] = e.missing
            emit_error(str(e), type=type(e).__name__, context=context)
            sys.exit(e.exit_code)
        except Exception as e:
            logger.debug("Command failed", exc_info=True)
            emit_error(str(e), type=type(e).__name__)
            sys.exit(get_exit_code_for_exception(e))

    return wrapper


# Standard options that many commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                           help='Enable debug logging on stderr'),
    'quiet': click.option('-q', '--quiet', is_flag=True,
                         help='Suppress data output'),
    'pretty': click.option('--pretty', is_flag=True,
                          help='Display results as a formatted table'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'quiet')
        def my_command(verbose, quiet):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
