from logging import getLogger

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class PasswordHashingError(BaseAppError):
    """Base error for password hasher module."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail)


class PasswordBackendError(PasswordHashingError):
    """The hashing backend failed; the same input may succeed on a later attempt."""

    def __init__(self, detail: str = "Password hashing backend unavailable") -> None:
        super().__init__(detail)


password_hashing_exception_handler = create_exception_handler(logger)
