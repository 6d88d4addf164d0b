# utils/logger.py - package logger helper
import logging
import os

PACKAGE_LOGGER = "digitickets_api"


def get_logger(name: str = PACKAGE_LOGGER):
    # Handlers live on the package logger only; module loggers propagate to it.
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        package_logger.addHandler(logging.NullHandler())
        level = os.environ.get("DIGITICKETS_LOG_LEVEL", "").strip().upper()
        if level:
            package_logger.setLevel(level)
    return logging.getLogger(name)
