from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..models.validation_error import ValidationError

"""Logging initialization for the cart parser.

Everything goes to stdout as `<LABEL> <message>`:

    INFO weekly.csv: items=5 total=348.32
    ERROR data/bad.csv: cell row=1 column=2 Expected cell to be a positive number ...
    SUMMARY files=2/2 success=1 failed=1 items=5 total=348.32 elapsed_sec=0.01

Library modules log through `logging.getLogger(__name__)`; since they all sit
under the `cart_parser` logger their records reach the handler set up here.
"""

__all__ = [
    "LOGGER_NAME",
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "enable_debug",
    "format_validation_error",
    "get_logger",
    "log_summary",
    "log_validation_errors",
    "reset_logging",
    "setup_logging",
]

LOGGER_NAME = "cart_parser"

# INFO(20) と WARNING(30) の間
SUMMARY_LEVEL = 25

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """Prefix each message with a short level label (WARNING -> WARN)."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
        SUMMARY_LEVEL: "SUMMARY",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach the labeled stdout handler to the `cart_parser` logger.

    Idempotent: later calls return the configured logger unchanged (use
    enable_debug() to switch levels afterwards).
    """
    global _logger
    if _logger is not None:
        return _logger

    logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")
    logger = logging.getLogger(LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # sys.stdout は呼び出し時点のものを使う (pytest capsys 対応)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    _set_level(logger, logging.DEBUG if debug else logging.INFO)
    return logger


def _set_level(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def enable_debug() -> logging.Logger:
    """Switch the application logger (and its handlers) to DEBUG."""
    logger = get_logger()
    _set_level(logger, logging.DEBUG)
    logger.debug("debug mode enabled")
    return logger


def get_logger() -> logging.Logger:
    """Get the configured application logger, configuring it on first use."""
    if _logger is None:
        return setup_logging()
    return _logger


def log_summary(message: str) -> None:
    """Log a message at SUMMARY level."""
    get_logger().log(SUMMARY_LEVEL, message)


def format_validation_error(source: str, error: ValidationError) -> str:
    """One diagnostic line: `<source>: <kind> row=<r> column=<c> <message>`."""
    return f"{source}: {error.type.value} row={error.row} column={error.column} {error.message}"


def log_validation_errors(source: str, errors: Sequence[ValidationError]) -> None:
    """Default diagnostic sink: one ERROR line per validation error.

    Logs through the `cart_parser.parser` logger so it works whether or not
    setup_logging() was called (e.g. library use under pytest caplog).
    """
    logger = logging.getLogger(f"{LOGGER_NAME}.parser")
    for e in errors:
        logger.error(format_validation_error(source, e))


def reset_logging() -> None:
    """Reset the global logger state. Mainly for testing purposes."""
    global _logger
    _logger = None
