"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the bloglist backend application.
"""

from dataclasses import dataclass
from logging import INFO, Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from pythonjsonlogger.json import JsonFormatter

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 5


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_FILE: str = "logs/bloglist.log"

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30  # seconds
    POOL_RECYCLE: int = 1800  # seconds

    # Token configuration
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-frontend"

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


settings = Settings()


@dataclass(frozen=True)
class PasswordHasherConfig:
    """Argon2id cost parameters for one security level."""

    memory_cost: int  # KiB
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, PasswordHasherConfig] = {
    "low": PasswordHasherConfig(memory_cost=8 * 1024, time_cost=1, parallelism=1),
    "medium": PasswordHasherConfig(memory_cost=64 * 1024, time_cost=2, parallelism=2),
    "high": PasswordHasherConfig(memory_cost=512 * 1024, time_cost=2, parallelism=2),
}


def file_logger(logger: Logger) -> Logger:
    """
    Attach the shared rotating JSON file handler to a logger.

    Does nothing when ``LOG_TO_FILE`` is disabled, and never attaches the
    handler twice to the same logger.

    Args:
        logger: Logger to extend.

    Returns:
        Logger: The same logger instance.
    """
    if not settings.LOG_TO_FILE:
        return logger

    log_file = Path(settings.LOG_FILE).resolve()
    if any(getattr(h, "baseFilename", None) == str(log_file) for h in logger.handlers):
        return logger

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
    )
    handler.setLevel(INFO)
    handler.setFormatter(JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    logger.addHandler(handler)
    return logger
