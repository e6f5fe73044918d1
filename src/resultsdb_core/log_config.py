# src/resultsdb_core/log_config.py
import logging
import sys
from typing import IO, Optional, Union

PACKAGE_LOGGER_NAME = "resultsdb_core"
LOG_FORMAT = "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO, stream: Optional[IO[str]] = None):
    """
    Configures the package logger to write to stdout (or the given stream).

    Only the 'resultsdb_core' logger is touched, so applications embedding the
    library keep control over the root logger. Records still propagate upwards.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    log_formatter = logging.Formatter(LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)

    # Re-running the setup replaces the handler instead of stacking a second one.
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(log_formatter)
    package_logger.setLevel(level)
    package_logger.addHandler(console_handler)
    package_logger.debug(f"Logging configured at level {logging.getLevelName(level)}.")
