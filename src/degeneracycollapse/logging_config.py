"""
Logging Configuration
Sets up the 'degeneracycollapse' logger and quiets chatty third-party loggers.
"""
import logging
import sys
from typing import Iterable, Optional

from degeneracycollapse.config import LOG_FORMAT, LOG_DATE_FORMAT, QUIET_LOGGERS

PACKAGE_LOGGER = "degeneracycollapse"


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> logging.Logger:
    """
    Configures the package logger.

    Render passes log every slider tick at DEBUG, so the third-party loggers
    listed in `quiet` are pinned to WARNING to keep a debug session readable.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        quiet: Logger names raised to WARNING.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # main() may run more than once per process (tests, restarts)
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging initialized ({logging.getLevelName(level)}"
                f"{', file: ' + log_file if log_file else ''}).")
    return logger
