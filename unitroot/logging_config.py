"""
Logging setup for unitroot.

Library modules only ever call ``logging.getLogger(__name__)``; nothing is
printed unless an application attaches handlers or calls
:func:`configure_logging`.

Usage:
    from unitroot.logging_config import configure_logging
    configure_logging("DEBUG")
"""

import logging
from typing import Optional, Union

from unitroot.config import LOG_LEVEL

PACKAGE_LOGGER = "unitroot"

# Handler installed by configure_logging, kept so repeated calls reuse it.
_console_handler: Optional[logging.Handler] = None


class ConsoleFormatter(logging.Formatter):
    """Human-readable single line format."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.WARNING)


def configure_logging(level: Union[int, str, None] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Parameters
    ----------
    level : int or str, optional
        Logging level. Defaults to ``UNITROOT_LOG_LEVEL`` or WARNING.

    Returns
    -------
    logging.Logger
        The ``unitroot`` package logger.
    """
    global _console_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    resolved = _resolve_level(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(ConsoleFormatter())
        logger.addHandler(_console_handler)

    _console_handler.setLevel(resolved)
    logger.setLevel(resolved)
    return logger


def reset_logging() -> None:
    """Remove the handler added by configure_logging (used for test isolation)."""
    global _console_handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    if _console_handler is not None:
        _console_handler.close()
        logger.removeHandler(_console_handler)
        _console_handler = None
    logger.setLevel(logging.NOTSET)
