"""Logging configuration for onewip."""

import logging
import sys
from datetime import UTC, datetime
from pathlib import Path

LOGGER_NAME = "onewip"

# Thread name tells the persistence worker apart from the UI loop.
LOG_FORMAT = "%(asctime)s %(threadName)s %(name)s %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_for(verbose: int) -> int:
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _configured(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Attach handlers to the ``onewip`` logger.

    Nothing is configured unless ``verbose`` or ``log_file`` is given.
    Stderr shares the terminal with the board, so when both are given the
    file receives everything and stderr only warnings and errors.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = _level_for(verbose)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_configured(logging.FileHandler(log_file, encoding="utf-8"), level))

    if verbose > 0:
        stderr_level = level if log_file is None else logging.WARNING
        logger.addHandler(_configured(logging.StreamHandler(sys.stderr), stderr_level))

    started = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S UTC")
    logger.info("onewip starting | %s | level=%s", started, logging.getLevelName(level))
