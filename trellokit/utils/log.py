"""
Logging setup for trellokit.

Library modules only create loggers; handlers are installed by
configure_logging(), which the CLI and TrelloClient.create(debug=True) call.
"""

import logging

LOGGER_NAME = "trellokit"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"


def configure_logging(debug: bool = False) -> logging.Logger:
    """
    Install a single stream handler on the package logger.

    Calling it again replaces the handler instead of stacking a new one.

    Args:
        debug: Log at DEBUG when True, WARNING otherwise

    Returns:
        The package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.propagate = False

    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)

    return logger
