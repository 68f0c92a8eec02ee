from bloglist.errors.auth import (
    InvalidCredentialsError,
    InvalidTokenError,
    NotBlogOwnerError,
    UserAuthenticationError,
    auth_exception_handler,
)
from bloglist.errors.base import BaseAppError, create_exception_handler
from bloglist.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DatabaseInitializationError,
    DuplicateEntryError,
    RecordNotFoundError,
    database_exception_handler,
)
from bloglist.errors.password_hasher import (
    PasswordBackendError,
    PasswordHashingError,
    password_hashing_exception_handler,
)
from bloglist.errors.validation import validation_exception_handler

__all__ = [
    "BaseAppError",
    "DatabaseConnectionError",
    "DatabaseError",
    "DatabaseInitializationError",
    "DuplicateEntryError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "NotBlogOwnerError",
    "PasswordBackendError",
    "PasswordHashingError",
    "RecordNotFoundError",
    "UserAuthenticationError",
    "auth_exception_handler",
    "create_exception_handler",
    "database_exception_handler",
    "password_hashing_exception_handler",
    "validation_exception_handler",
]
