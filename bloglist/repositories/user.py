"""User repository for database operations."""

from sqlalchemy import select

from bloglist.errors.database import DuplicateEntryError
from bloglist.managers.password_manager import hash_password
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.user import UserCreate

DUPLICATE_USERNAME = "expected `username` to be unique"


class UserRepository(BaseRepository[UserDB, UserCreate, UserCreate]):
    """Repository for User database operations."""

    model = UserDB
    id_field = "uuid"

    async def create(self, user: UserCreate) -> UserDB:
        """
        Create a new user with a hashed password.

        Args:
            user: Validated user payload

        Returns:
            UserDB: Created user database model

        Raises:
            DuplicateEntryError: If the username is already taken
        """
        if await self._check_exists_by_field("username", user.username):
            raise DuplicateEntryError(detail=DUPLICATE_USERNAME)

        password_hash = await hash_password(user.password.get_secret_value())
        db_user = UserDB(
            username=user.username,
            name=user.name,
            password_hash=password_hash,
        )

        try:
            return await self._add_and_refresh(db_user)
        except DuplicateEntryError as e:
            # Lost a race with a concurrent registration
            raise DuplicateEntryError(detail=DUPLICATE_USERNAME) from e

    async def get_by_username(self, username: str) -> UserDB | None:
        """
        Get user by username.

        Args:
            username: Username

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.get_by_field("username", username)

    async def get_all(self) -> list[UserDB]:
        """
        Get every user in registration order.

        Returns:
            list[UserDB]: All users
        """
        # pyrefly: ignore [bad-argument-type]
        statement = select(UserDB).order_by(UserDB.created_at)
        result = await self.session.execute(statement)
        return list(result.scalars().all())


    async def update_password_hash(self, user: UserDB, password_hash: str) -> UserDB:
        """
        Replace a user's stored password hash.

        Args:
            user: User to update
            password_hash: New hash for the same password

        Returns:
            UserDB: Updated user
        """
        user.password_hash = password_hash
        return await self._add_and_refresh(user)
