"""
Logging configuration for the Cognito fetch client.

Loggers write to stdout with a timestamped format; the level comes from
the LOG_LEVEL environment variable. Stdout is used so that output lands in
CloudWatch Logs when the client runs inside AWS Lambda or a container.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _level_from_env() -> int:
    level_name = os.environ.get('LOG_LEVEL', 'INFO').upper()
    return getattr(logging, level_name, logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (defaults to this module's name)

    Returns:
        Logger with a single stdout handler attached
    """
    logger = logging.getLogger(name or __name__)

    # Handlers are attached once per logger name
    if logger.handlers:
        return logger

    logger.setLevel(_level_from_env())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.propagate = False

    return logger
