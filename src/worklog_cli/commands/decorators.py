"""Decorators for command functions."""

import asyncio
import functools
import time
import traceback
from collections.abc import Callable

import typer

from worklog_cli.models.exceptions import WorklogError
from worklog_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_STORAGE,
    get_exit_code_description,
    get_exit_code_name,
)
from worklog_cli.utils.logger import get_logger
from worklog_cli.utils.ui.formatters import format_error, format_info

# Failures the user can fix through `worklog config`
HINTED_EXIT_CODES = (ERROR_CONFIG, ERROR_STORAGE)


def command_wrapper(func: Callable):
    """Decorator to wrap command functions with common functionality.

    Coroutine commands are run to completion, and ``WorklogError`` is
    reported and turned into the matching exit code.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger()
        cmd = func.__name__
        start = time.monotonic()
        logger.info("command started: %s", cmd)
        try:
            if asyncio.iscoroutinefunction(func):
                result = asyncio.run(func(*args, **kwargs))
            else:
                result = func(*args, **kwargs)

            elapsed = time.monotonic() - start
            logger.info("command completed: %s (%.3fs)", cmd, elapsed)
            return result

        except WorklogError as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s [%s]",
                cmd,
                elapsed,
                str(e),
                get_exit_code_name(e.exit_code),
            )
            format_error(str(e))
            if e.exit_code in HINTED_EXIT_CODES:
                format_info(get_exit_code_description(e.exit_code))
            raise typer.Exit(code=e.exit_code) from e

        except (typer.Exit, typer.Abort):
            raise

        except Exception as e:
            elapsed = time.monotonic() - start
            logger.error(
                "command failed: %s (%.3fs) - %s\n%s",
                cmd,
                elapsed,
                str(e),
                traceback.format_exc(),
            )
            format_error(f"An unexpected error occurred: {str(e)}")
            raise typer.Exit(code=ERROR_GENERAL) from e

    return wrapper
