# logging.py
"""
Diagnostic logging for roster_manager.

Modules use:
    from roster_manager.logging import get_logger
    logger = get_logger(__name__)

The roster's action log (timestamped lines on stdout) is separate and goes
through the sink given to Roster; this module only configures the stderr
diagnostics channel.
"""
import logging
import sys

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
ROOT_LOGGER = "roster_manager"


def configure_logging(level: int = logging.WARNING, fmt: str = DEFAULT_FORMAT, stream=None):
    """
    Attach one stream handler to the package logger.
    Calling it again only changes the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
