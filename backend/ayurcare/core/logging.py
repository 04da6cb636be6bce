"""
Logging setup for the consultation backend.
"""
import logging
import sys

from ayurcare.core.config import settings


def setup_logger(name: str = "ayurcare", level: str = None) -> logging.Logger:
    """
    Configure the package logger with a single stdout handler.

    Safe to call more than once; handlers are only attached the first time.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO))

    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | [%(name)s] | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
