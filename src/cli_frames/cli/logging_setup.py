"""Logging configuration for the ``cli-frames`` console script.

The library modules only create loggers; handlers are installed here,
once, by the CLI entry point.  Rich's ``RichHandler`` is used when Rich
is importable, a plain stderr handler otherwise.
"""

from __future__ import annotations

import logging

from cli_frames.cli.console import get_rich_console
from cli_frames.exceptions import EnvironmentError

LOGGER_NAME: str = "cli_frames"


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the ``cli_frames`` logger.

    ``verbose`` lowers the threshold from WARNING to DEBUG.  Calling
    this again replaces the previously installed handler.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    try:
        console = get_rich_console()
        from rich.logging import RichHandler

        handler: logging.Handler = RichHandler(
            console=console,
            show_path=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    except (EnvironmentError, ModuleNotFoundError):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s"),
        )

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
