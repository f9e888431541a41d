"""
Logging utilities for safe structured logging.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def preview(value: Any, max_length: int = 200) -> str:
    """
    Convert a value to a bounded string for log fields.

    Markdown bodies and diagram sources can be large; log fields only
    carry a prefix plus the total length.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    text = value if isinstance(value, str) else repr(value)
    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    level: int = logging.ERROR,
    **context,
) -> None:
    """
    Log an exception with structured context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        level: Log level for the record
        **context: Additional context fields
    """
    fields = {key: preview(val) for key, val in context.items()}
    fields.update({"error_type": type(exc).__name__, "error_msg": preview(str(exc))})
    logger.log(level, message, extra=fields, exc_info=level >= logging.ERROR)
