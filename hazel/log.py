"""Engine and client loggers, assertions and small core helpers."""

from __future__ import annotations

import logging
import sys

CORE_LOGGER_NAME = "HAZEL"
CLIENT_LOGGER_NAME = "APP"

_HANDLER_NAME = "hazel-console"
_FORMAT = "[%(asctime)s] %(name)s: %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_LEVEL_COLORS = {
    logging.DEBUG: "\x1b[37m",
    logging.INFO: "\x1b[32m",
    logging.WARNING: "\x1b[33m",
    logging.ERROR: "\x1b[31m",
    logging.CRITICAL: "\x1b[1;41m",
}
_RESET = "\x1b[0m"


class HazelError(Exception):
    """Raised when an engine or client assertion fails."""


class _ColorFormatter(logging.Formatter):
    """Colours the whole line by level when writing to a terminal."""

    def __init__(self, use_color: bool) -> None:
        super().__init__(_FORMAT, _DATE_FORMAT)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = _LEVEL_COLORS.get(record.levelno) if self._use_color else None
        return f"{color}{text}{_RESET}" if color else text


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        is_tty = getattr(sys.stdout, "isatty", lambda: False)()
        handler.setFormatter(_ColorFormatter(use_color=bool(is_tty)))
        logger.addHandler(handler)
    return logger


def init_logging() -> None:
    """Set up the engine and client loggers; safe to call more than once."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """The logger used by the engine itself."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """The logger used by applications built on the engine."""
    return logging.getLogger(CLIENT_LOGGER_NAME)


def _check(logger: logging.Logger, condition: object, message: str) -> None:
    if not condition:
        logger.error("Assertion Failed: %s", message)
        raise HazelError(message)


def core_assert(condition: object, message: str) -> None:
    """Log through the engine logger and raise HazelError if condition is false."""
    _check(core_logger(), condition, message)


def client_assert(condition: object, message: str) -> None:
    """Log through the client logger and raise HazelError if condition is false."""
    _check(client_logger(), condition, message)


def bit(x: int) -> int:
    """Return an integer with only bit number x set."""
    return 1 << x