"""
Logging Configuration

Provides consistent logging setup across all branchreview modules.
"""

import logging
import sys


DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_initialized = False


def setup_logging(
    level: int | str = logging.INFO,
    format_string: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> None:
    """
    Configure logging for the branchreview package.

    Args:
        level: Logging level (default: INFO)
        format_string: Log message format
        date_format: Date format for timestamps
    """
    global _initialized

    if _initialized:
        return

    formatter = logging.Formatter(format_string, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    package_logger = logging.getLogger("branchreview")
    package_logger.setLevel(level)
    package_logger.addHandler(console_handler)

    _initialized = True
