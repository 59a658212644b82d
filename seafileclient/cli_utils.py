"""
Common CLI utilities and decorators for consistent command behavior.
"""

import logging
import sys
import click
from functools import wraps

from .config import load_config, create_transport
from .exit_codes import INTERRUPTED, get_exit_code_for_exception, CommandError
from .output import emit_error

logger = logging.getLogger(__name__)


def configure_logging(config: dict, verbose: bool = False) -> None:
    """Configure root logging on stderr from the `logging` config section."""
    log_config = config.get('logging', {})
    level = 'DEBUG' if verbose else str(log_config.get('level', 'INFO')).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=log_config.get('format', '%(levelname)s: %(message)s'),
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def standard_command(func):
    """
    Decorator that provides standard CLI behavior:
    - Loads configuration and configures logging
    - Builds the transport and injects it as `transport`
    - Consistent error handling with typed exit codes

    The decorated command receives `config` and `transport` keyword
    arguments in addition to its own options.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            config = load_config()
            configure_logging(config, verbose=kwargs.pop('verbose', False))
            kwargs['config'] = config
            kwargs['transport'] = create_transport(config)
            return func(*args, **kwargs)
        except KeyboardInterrupt:
            click.echo("Interrupted by user", err=True)
            sys.exit(INTERRUPTED)
        except click.ClickException:
            raise
        except CommandError as e:
            emit_error(e, e.exit_code)
            sys.exit(e.exit_code)
        except ValueError as e:
            exit_code = get_exit_code_for_exception(e)
            emit_error(e, exit_code)
            sys.exit(exit_code)

    return wrapper


# Standard options that many commands share
common_options = {
    'verbose': click.option('-v', '--verbose', is_flag=True,
                            help='Log requests and debug information to stderr'),
    'pretty': click.option('--pretty', is_flag=True,
                           help='Render a table instead of JSONL'),
}


def add_common_options(*option_names):
    """
    Decorator to add common options to a command.

    Example:
        @add_common_options('verbose', 'pretty')
        def my_command(verbose, pretty):
            ...
    """
    def decorator(func):
        for name in reversed(option_names):
            if name in common_options:
                func = common_options[name](func)
        return func
    return decorator
