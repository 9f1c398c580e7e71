from __future__ import annotations

import logging
import sys

"""Logging for the po-split CLI.

Every line the CLI prints goes through the "po_split" logger so that output is
uniform and easy to grep:

    INFO Loaded 1200 rows from orders.csv
    DEBUG [store_filter] skipping empty store identifier
    ERROR The input field can not be empty.
    SUMMARY stores=3 labels=420 tagged=60 untagged=360 boxes=7

Debug lines coming from a service module carry that module's short name in
brackets; everything else is `LABEL message`. The SUMMARY level sits between
INFO and WARNING so it still shows when --debug is off.
"""

__all__ = [
    "SUMMARY_LEVEL",
    "LabeledFormatter",
    "setup_logging",
    "get_logger",
    "log_summary",
    "set_debug",
    "reset_logging",
]

LOGGER_NAME = "po_split"

SUMMARY_LEVEL = 25
SUMMARY_PREFIX = "SUMMARY "

_logger: logging.Logger | None = None


class LabeledFormatter(logging.Formatter):
    """`LABEL message`, with `[module]` added to debug lines of child loggers."""

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
        message = record.getMessage()
        if record.levelno == logging.DEBUG and record.name.startswith(LOGGER_NAME + "."):
            message = f"[{record.name.rsplit('.', 1)[-1]}] {message}"
        return f"{label} {message}"


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the "po_split" logger once and return it.

    Service modules log through `logging.getLogger(__name__)`; they are
    children of this logger and share its stdout handler. Calling again
    returns the same logger, lowering it to DEBUG when `debug` is set.
    """
    global _logger

    if _logger is None:
        logging.addLevelName(SUMMARY_LEVEL, "SUMMARY")

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.INFO)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(logging.INFO)
        handler.setFormatter(LabeledFormatter())
        logger.addHandler(handler)
        logger.propagate = False
        _logger = logger

    if debug:
        set_debug(_logger)
    return _logger


def get_logger() -> logging.Logger:
    if _logger is None:
        return setup_logging()
    return _logger


def set_debug(logger: logging.Logger) -> None:
    """Lower the logger and its handlers to DEBUG."""
    for h in logger.handlers:
        h.setLevel(logging.DEBUG)
    logger.setLevel(logging.DEBUG)


def log_summary(line: str) -> None:
    """Log a rendered summary line at SUMMARY level.

    Lines from services.summary already start with "SUMMARY "; that prefix is
    dropped so the formatter's label is not doubled.
    """
    if line.startswith(SUMMARY_PREFIX):
        line = line[len(SUMMARY_PREFIX):]
    get_logger().log(SUMMARY_LEVEL, line)


def reset_logging() -> None:
    """Forget the configured logger. Tests call this between CLI runs."""
    global _logger
    _logger = None
