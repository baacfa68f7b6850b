import logging

from unitroot import configure_logging
from unitroot.logging_config import PACKAGE_LOGGER, ConsoleFormatter, reset_logging


def _console_handlers(logger):
    return [h for h in logger.handlers if isinstance(h.formatter, ConsoleFormatter)]


def test_configure_is_idempotent():
    logger = configure_logging("INFO")
    configure_logging("INFO")

    assert logger.name == PACKAGE_LOGGER
    assert len(_console_handlers(logger)) == 1


def test_configure_sets_level():
    logger = configure_logging("debug")
    assert logger.level == logging.DEBUG

    configure_logging(logging.ERROR)
    assert logger.level == logging.ERROR
    assert _console_handlers(logger)[0].level == logging.ERROR


def test_default_level_is_warning(monkeypatch):
    monkeypatch.setattr("unitroot.logging_config.LOG_LEVEL", "WARNING")
    assert configure_logging().level == logging.WARNING


def test_reset_removes_handler():
    logger = configure_logging("INFO")
    reset_logging()

    assert _console_handlers(logger) == []
    assert logger.level == logging.NOTSET


def test_library_is_silent_by_default():
    logger = logging.getLogger(PACKAGE_LOGGER)
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
