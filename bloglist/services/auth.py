"""Authentication service: password login and bearer token verification."""

from bloglist.errors.auth import InvalidCredentialsError, InvalidTokenError
from bloglist.managers.password_manager import (
    get_password_hasher,
    hash_password,
    verify_password,
)
from bloglist.managers.token_manager import create_access_token, decode_access_token
from bloglist.models import UserDB
from bloglist.monitoring import get_logger
from bloglist.repositories import UserRepository
from bloglist.schemas.auth import LoginResponse

logger = get_logger(__name__)


class AuthService:
    """Service for handling user authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def authenticate_user(self, username: str, password: str) -> UserDB:
        """
        Authenticate a user by username and password.

        A hash made with a deprecated scheme or weaker cost parameters is
        replaced by a fresh Argon2id hash once the password is verified.

        Args:
            username: Account username
            password: Plaintext password

        Returns:
            UserDB: Authenticated user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_username(username)
        password_hash = user.password_hash if user else None

        if not await verify_password(password, password_hash) or user is None:
            logger.warning("Failed login attempt", username=username)
            raise InvalidCredentialsError

        if get_password_hasher().check_needs_rehash(user.password_hash):
            user = await self.user_repo.update_password_hash(user, await hash_password(password))
            logger.info("Password hash upgraded", username=username)

        logger.info("User logged in", username=username)
        return user

    def create_token_for_user(self, user: UserDB) -> LoginResponse:
        """
        Issue a bearer token for a user.

        Args:
            user: Authenticated user

        Returns:
            LoginResponse: Token plus the user's public details
        """
        token = create_access_token(user_id=user.uuid, username=user.username)
        return LoginResponse(token=token, username=user.username, name=user.name)

    async def get_user_from_token(self, token: str) -> UserDB:
        """
        Resolve the user a bearer token was issued to.

        Args:
            token: Encoded access token

        Returns:
            UserDB: Token owner

        Raises:
            InvalidTokenError: If the token is invalid or its user no longer exists
        """
        token_data = decode_access_token(token)
        if not token_data:
            raise InvalidTokenError

        user = await self.user_repo.get_by_id(token_data.user_id)
        if not user:
            raise InvalidTokenError("user not found")

        return user
