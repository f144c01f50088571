"""Logging configuration for applications embedding the SDK."""

import logging
import sys
from typing import Optional

import structlog

SDK_LOGGERS = [
    "elephantasm",
]

# Transport libraries log every request line at INFO
THIRD_PARTY_LOGGERS = [
    "httpx",
    "httpcore",
]

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
]


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Setup application-wide logging configuration.

    The SDK never calls this on its own; applications opt in.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        include_timestamp: Whether to include timestamp in log format
    """

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )

    configure_specific_loggers(numeric_level)

    logger = get_logger(__name__)
    logger.info("Logging configured", level=level)


def configure_specific_loggers(base_level: int) -> None:
    """
    Configure specific loggers with appropriate levels.

    Args:
        base_level: Base logging level to use
    """

    for logger_name in SDK_LOGGERS:
        logging.getLogger(logger_name).setLevel(base_level)

    for logger_name in THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with the specified name.

    The structlog wrapper sits on top of the stdlib logger of the same name,
    so levels and handlers stay under the host application's control.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger accepting key-value context
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def set_debug_mode(enabled: bool = True) -> None:
    """
    Enable or disable debug mode for SDK loggers.

    Args:
        enabled: Whether to enable debug mode
    """
    level = logging.DEBUG if enabled else logging.INFO

    for logger_name in SDK_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)

    logger = get_logger(__name__)
    logger.info("Debug mode toggled", enabled=enabled)
