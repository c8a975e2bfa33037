"""
Logging helpers for the nodechain package.

The containers log through ``logging.getLogger(__name__)`` and stay silent
unless the application configures a handler. The library never calls
``setup_logger`` itself; applications call it to get console (and optionally
rotating file) output with a consistent format.

Example:
    from nodechain import LinkedList
    from nodechain.logger import setup_logger
    import logging

    setup_logger("nodechain", level=logging.DEBUG)
    LinkedList([1, 2]).remove_node(LinkedList([1]).head)  # logs "not found"
"""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

# Format shared by every handler this module creates
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_LOG_LEVEL = logging.INFO

# Rotation settings for the optional file handler
DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_BACKUP_COUNT = 5


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: int = DEFAULT_LOG_LEVEL,
    max_size: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> logging.Logger:
    """
    Configure and return the logger called `name`.

    - Always attaches a console handler.
    - Attaches a RotatingFileHandler when `log_file` is given.
    - Calling it again for the same name only updates the level; handlers
      are not duplicated.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # The package root carries a NullHandler; it does not count as configured.
    configured = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]

    if not configured:
        formatter = logging.Formatter(LOG_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file is not None:
            file_handler = RotatingFileHandler(log_file, maxBytes=max_size, backupCount=backup_count)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
    else:
        for handler in configured:
            handler.setLevel(level)

    return logger
