"""
Structured logging with secret sanitization.

This module provides structured logging using structlog with:
- Pretty console output for development
- JSON output for every other environment
- Automatic redaction of bearer tokens and passwords

Examples
--------
>>> from bloglist.monitoring import get_logger
>>> logger = get_logger("my_module")
>>> logger.info("User logged in", username="root")
"""

from re import Pattern
from re import compile as re_compile

from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level, format_exc_info
from structlog.stdlib import BoundLogger
from structlog.types import EventDict, Processor, WrappedLogger

from bloglist.configs import settings

# Keys whose values must never reach a log sink
SENSITIVE_KEYS: frozenset[str] = frozenset(
    {"password", "password_hash", "token", "authorization", "secret_key"},
)

# Order matters: more specific patterns should come before general ones
SECRET_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"\$argon2id?\$[^\s]+"), "[REDACTED_HASH]"),
    (re_compile(r"\$pbkdf2-sha256\$[^\s]+"), "[REDACTED_HASH]"),
]

# Characters to sanitize to prevent log injection
CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def sanitize_log_message(message: str) -> str:
    r"""
    Remove control characters and sanitize log messages.

    Examples
    --------
    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return message.translate(CONTROL_CHARS)


def redact_secrets(message: str) -> str:
    """
    Redact tokens and password hashes from log messages.

    Examples
    --------
    >>> redact_secrets("hash $argon2id$v=19$m=8,t=1,p=1$abc")
    'hash [REDACTED_HASH]'
    """
    for pattern, replacement in SECRET_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Sanitize the event dictionary for secrets and log injection."""
    for key, value in event_dict.items():
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = "[REDACTED]"
        elif isinstance(value, str):
            event_dict[key] = redact_secrets(sanitize_log_message(value))
    return event_dict


def get_processors() -> list[Processor]:
    """Return the structlog processor chain for the current environment."""
    processors: list[Processor] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
        format_exc_info,
        sanitize_event_dict,
    ]
    if settings.ENVIRONMENT == "development":
        processors.append(ConsoleRenderer(pad_level=False))
    else:
        processors.append(JSONRenderer())
    return processors


def configure_structlog() -> None:
    """Configure structlog for the application."""
    configure(
        processors=get_processors(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: The name of the logger (typically __name__).

    Returns:
        Configured structlog logger.
    """
    return struct_logger(name)
