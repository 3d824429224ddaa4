"""
Logging configuration for tprint
"""
import logging
import logging.handlers
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_MAX_BYTES = 10485760  # 10MB
LOG_BACKUP_COUNT = 3


def setup_logger(name: str = 'tprint', log_file: Optional[str] = None,
                 log_level: str = 'WARNING') -> logging.Logger:
    """Configure the tprint logger for a CLI run

    Console output goes to stderr so it never mixes with tables on stdout.

    Args:
        name: Logger name
        log_file: Optional rotating log file
        log_level: Logging level name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.handlers.clear()

    level = getattr(logging, str(log_level).upper(), logging.WARNING)
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.handlers.RotatingFileHandler(
                log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
            ))
        except OSError as e:
            logger.warning(f"Failed to setup file logging: {e}")

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = 'tprint') -> logging.Logger:
    """Get a module logger under the tprint hierarchy"""
    return logging.getLogger(name)
