"""
cmdarg logging helpers.

The package logs through loguru under the "cmdarg" name and is disabled on
import (see cmdarg/__init__.py), so embedding applications see nothing until
they opt in with configure_logging() or logger.enable("cmdarg").
"""
import sys
from logging import Handler

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

_PLAIN_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED = None


def _build_rich_handler() -> Handler:
    return RichHandler(
        console=Console(stderr=True),
        show_level=True,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )


def configure_logging(level: str = "INFO", *, rich: bool = True) -> None:
    """Enable cmdarg logging with a single stderr sink; repeated identical calls are no-ops."""
    global _CONFIGURED
    if (level, rich) == _CONFIGURED:
        return

    logger.remove()
    if rich:
        logger.add(
            _build_rich_handler(),
            level=level.upper(),
            format="{message}",
            backtrace=False,
            diagnose=False,
        )
    else:
        logger.add(
            sys.stderr,
            level=level.upper(),
            format=_PLAIN_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    logger.enable("cmdarg")
    _CONFIGURED = (level, rich)
