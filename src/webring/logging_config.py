"""
Opt-in log output for the webring client.

Modules log through loggers under the "webring" namespace and nothing is
configured on import. setup_logging() attaches one handler to that
namespace only, so an application's root logging setup is left untouched.
"""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LIBRARY_LOGGER = "webring"


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module of this package.

    Names outside the "webring" namespace are nested under it, so that
    setup_logging() always reaches them.
    """
    if name != LIBRARY_LOGGER and not name.startswith(LIBRARY_LOGGER + "."):
        name = f"{LIBRARY_LOGGER}.{name}"
    return logging.getLogger(name)


class _WebringRichHandler(RichHandler):
    """Rich handler installed by setup_logging; replaced on the next call."""


class _WebringStreamHandler(logging.StreamHandler):
    """Plain handler installed by setup_logging; replaced on the next call."""


def _build_handler(use_rich: bool) -> logging.Handler:
    if use_rich:
        handler = _WebringRichHandler(
            console=Console(file=sys.stderr),
            show_path=False,
            rich_tracebacks=True,
            markup=False,  # URLs may contain brackets
            log_time_format="[%H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        return handler

    handler = _WebringStreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(
        "[%(asctime)s] %(levelname)-5s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    return handler


def setup_logging(level: str = "INFO", use_rich: bool = True, propagate: bool = False) -> logging.Logger:
    """
    Show the client's fetch and decode records on stderr.

    Calling it again replaces the handler it installed before rather than
    adding a second one.

    Args:
        level: Log level name for the "webring" loggers (DEBUG shows every fetch)
        use_rich: Render with Rich instead of a plain stream handler
        propagate: Also pass records on to the application's root handlers

    Returns:
        The configured "webring" logger.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in logger.handlers[:]:
        if isinstance(handler, (_WebringRichHandler, _WebringStreamHandler)):
            logger.removeHandler(handler)

    logger.addHandler(_build_handler(use_rich))
    logger.setLevel(numeric_level)
    logger.propagate = propagate
    return logger
