"""Logging configuration for taskpulse."""

import logging
import sys
from pathlib import Path

from .utils import now_utc

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# httpx logs every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def _level_for(verbose: int) -> int:
    """Map -v count to a logging level. File-only logging uses INFO."""
    if verbose >= 2:
        return logging.DEBUG
    return logging.INFO


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the taskpulse logger.

    Nothing is configured unless verbosity or a log file is requested.
    Calling this again replaces the handlers from the previous call.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    if verbose == 0 and log_file is None:
        return

    level = _level_for(verbose)
    logger = logging.getLogger("taskpulse")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    # Stderr only when asked for; the TUI owns the terminal otherwise
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    third_party_level = logging.DEBUG if verbose >= 3 else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(third_party_level)

    logger.info("=" * 60)
    logger.info(
        "taskpulse starting | %s | level=%s",
        now_utc().strftime("%Y-%m-%d %H:%M:%S UTC"),
        logging.getLevelName(level),
    )
    logger.info("=" * 60)
