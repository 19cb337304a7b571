"""Logging configuration for applications embedding assexport."""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional, TextIO

from .exceptions import FileSystemError

PACKAGE_LOGGER = "assexport"
DEFAULT_LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Marks handlers installed here so a second call only replaces its own.
_HANDLER_MARK = "_assexport_handler"


def setup_logging(
    log_level: int = logging.INFO,
    log_path: Optional[str] = None,
    stream: Optional[TextIO] = None,
    propagate: bool = False,
    log_format: str = DEFAULT_LOG_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
    max_bytes: int = 10 * 1024 * 1024, # 10 MB
    backup_count: int = 5
) -> logging.Logger:
    """
    Routes the package's export progress records to a stream and optionally a file.

    Only the "assexport" logger is touched; the root logger and the host's own
    handlers are left alone. At INFO every export reports its title, style and
    event counts and byte size; DEBUG adds validation and rendering details.
    Calling it again replaces the handlers from the previous call.

    Args:
        log_level: Minimum level for assexport records.
        log_path: Rotating log file to write as well, or None for the stream only.
        stream: Stream for console output, stdout when None.
        propagate: Whether records also reach the host's root handlers.
        log_format: The format string for log messages.
        date_format: The format string for timestamps in logs.
        max_bytes: Maximum size of the log file before rotation.
        backup_count: Number of rotated log files to keep.

    Returns:
        The configured "assexport" logger.

    Raises:
        FileSystemError: If the log file directory cannot be created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in logger.handlers[:]:
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    logger.setLevel(log_level)
    logger.propagate = propagate
    formatter = logging.Formatter(log_format, datefmt=date_format)

    handlers = [logging.StreamHandler(stream or sys.stdout)]
    if log_path:
        log_dir = os.path.dirname(log_path)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(
                RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8')
            )
        except OSError as e:
            raise FileSystemError(f"Could not open log file {log_path}: {e}") from e

    for handler in handlers:
        setattr(handler, _HANDLER_MARK, True)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"assexport logging set to {logging.getLevelName(log_level)}, file: {log_path}")
    return logger
