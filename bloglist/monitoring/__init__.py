"""
Observability helpers for the bloglist backend.

Usage
-----
>>> from bloglist.monitoring import configure_structlog, get_logger
>>> configure_structlog()
>>> logger = get_logger(__name__)
"""

from bloglist.monitoring.logging import (
    configure_structlog,
    get_logger,
    redact_secrets,
    sanitize_log_message,
)

__all__ = [
    "configure_structlog",
    "get_logger",
    "redact_secrets",
    "sanitize_log_message",
]
