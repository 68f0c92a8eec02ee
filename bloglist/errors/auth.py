"""Authentication errors."""

from logging import getLogger

from starlette.status import HTTP_401_UNAUTHORIZED

from bloglist.configs import file_logger
from bloglist.errors.base import BaseAppError, create_exception_handler

logger = file_logger(getLogger(__name__))


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class InvalidCredentialsError(UserAuthenticationError):
    """Raised when credentials are invalid."""

    def __init__(self) -> None:
        super().__init__("invalid username or password")


class InvalidTokenError(UserAuthenticationError):
    """Raised when a bearer token is missing, malformed, expired or orphaned."""

    def __init__(self, detail: str = "token invalid") -> None:
        super().__init__(detail)


class NotBlogOwnerError(UserAuthenticationError):
    """Raised when a user tries to remove a blog created by someone else."""

    def __init__(self) -> None:
        super().__init__("only the creator can delete a blog")


auth_exception_handler = create_exception_handler(logger)
