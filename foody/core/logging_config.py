"""
Centralized logging configuration for the Foody application.
"""
import logging
import sys

PACKAGE_LOGGER = "foody"

# Create a formatter with a consistent format
FORMATTER = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger instance.

    The stdout handler lives on the package logger, so module loggers
    (``foody.services...``) share it through propagation.

    Args:
        name: The name of the logger (typically __name__)

    Returns:
        A configured Logger instance
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(FORMATTER)
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.INFO)

    return logging.getLogger(name)


def setup_logging(level: int = logging.INFO) -> None:
    """
    Set the level of every Foody logger.

    Args:
        level: The logging level (default: INFO)
    """
    get_logger(PACKAGE_LOGGER).setLevel(level)
