"""
Structured logging utilities for Bahith library.

Provides a configured logger and helper functions for consistent logging.
"""

import logging
import sys
from typing import Optional


# Default format for Bahith logs
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str = "bahith") -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (default: "bahith")

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def configure_logging(
    level: int | str = logging.INFO,
    format_string: Optional[str] = None,
    date_format: Optional[str] = None,
    stream: Optional[object] = None,
) -> logging.Logger:
    """
    Configure logging for the Bahith library.

    Args:
        level: Logging level (default: INFO)
        format_string: Log format string (default: DEFAULT_FORMAT)
        date_format: Date format string (default: DEFAULT_DATE_FORMAT)
        stream: Output stream (default: sys.stderr)

    Returns:
        Configured root logger for bahith
    """
    logger = logging.getLogger("bahith")
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT,
        datefmt=date_format or DEFAULT_DATE_FORMAT,
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


def enable_debug_logging() -> None:
    """Enable debug-level logging for the Bahith library."""
    configure_logging(level=logging.DEBUG)


def disable_logging() -> None:
    """Disable all Bahith logging."""
    logger = logging.getLogger("bahith")
    logger.handlers.clear()
    logger.addHandler(logging.NullHandler())


_logger = get_logger()


def log_catalog_loaded(reciters: int, surahs: int, terms: int) -> None:
    """Log a catalog snapshot swap."""
    _logger.info(
        f"Catalog loaded: {reciters} reciters, {surahs} surahs, {terms} terms"
    )


def log_search_start(query: str, script: str) -> None:
    """Log search start event."""
    _logger.debug(f"Searching: {query!r} (script={script})")


def log_search_complete(query: str, count: int, duration: float) -> None:
    """Log search complete event."""
    _logger.debug(f"Search complete: {query!r} -> {count} results in {duration * 1000:.1f}ms")


def log_warning(message: str, **context) -> None:
    """Log a warning with optional context."""
    if context:
        ctx_str = ", ".join(f"{k}={v}" for k, v in context.items())
        _logger.warning(f"{message} ({ctx_str})")
    else:
        _logger.warning(message)
