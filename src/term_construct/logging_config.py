"""
Logging configuration for applications built on the router.

The library itself only logs through module loggers under ``term_construct``
and stays silent unless the application calls ``setup_logging``.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "term_construct"


def setup_logging(verbose: bool = False) -> RichHandler:
    """
    Route router logs to stderr through Rich.

    Logs go to stderr so they never land in the screen area being cleared on
    stdout. Calling this again replaces the previously installed handler.

    Args:
        verbose: If True, log view transitions at DEBUG level

    Returns:
        The installed handler
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler
