"""Logging configuration for datarepo.

Repositories emit one DEBUG record per dispatched client call under the
``datarepo`` logger. Nothing is printed unless an application calls
setup_logging (directly or through Settings.configure_logging) or
configures logging itself.
"""

import logging
import sys
from pathlib import Path

LOGGER_NAME = "datarepo"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Names given to the handlers installed here, so a later call can find them
STDERR_HANDLER_NAME = "datarepo.stderr"
FILE_HANDLER_NAME = "datarepo.file"


def verbosity_to_level(verbose: int) -> int:
    """Map a -v count to a logging level (1=INFO, 2+=DEBUG)."""
    return logging.DEBUG if verbose >= 2 else logging.INFO


def _remove_installed_handlers(logger: logging.Logger) -> None:
    """Detach and close handlers added by an earlier setup_logging call."""
    for handler in list(logger.handlers):
        if handler.get_name() in (STDERR_HANDLER_NAME, FILE_HANDLER_NAME):
            logger.removeHandler(handler)
            handler.close()


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> None:
    """Configure the datarepo logger.

    Each call replaces the handlers installed by the previous one, so an
    embedding application can reconfigure without duplicating output.
    Handlers the application attached itself are left alone. Calling with
    no verbosity and no log file turns this package's output off again.

    Args:
        verbose: Verbosity level (0=off, 1=INFO, 2+=DEBUG)
        log_file: Optional path to write logs to file
    """
    logger = logging.getLogger(LOGGER_NAME)
    _remove_installed_handlers(logger)

    if verbose == 0 and log_file is None:
        logger.setLevel(logging.NOTSET)
        return

    level = verbosity_to_level(verbose)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if verbose > 0:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.set_name(STDERR_HANDLER_NAME)
        handlers.append(stderr_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.set_name(FILE_HANDLER_NAME)
        handlers.append(file_handler)

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging configured: level=%s", logging.getLevelName(level))
