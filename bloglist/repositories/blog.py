"""Blog repository for database operations."""

from datetime import UTC, datetime
from logging import getLogger
from uuid import UUID

from sqlalchemy import select

from bloglist.configs import file_logger
from bloglist.models.blog import BlogDB
from bloglist.models.user import UserDB
from bloglist.repositories.base import BaseRepository
from bloglist.schemas.blog import BlogCreate, BlogUpdate

logger = file_logger(getLogger(__name__))

type BlogWithUser = tuple[BlogDB, UserDB | None]


class BlogRepository(BaseRepository[BlogDB, BlogCreate, BlogUpdate]):
    """
    Repository for Blog database operations.

    Listings are returned in creation order, which is the order the
    statistics functions rely on for tie-breaks. Blogs sharing a timestamp
    fall back to id order so every listing agrees.
    """

    model = BlogDB

    async def create(self, blog: BlogCreate, user_id: UUID | None = None) -> BlogDB:
        """
        Create a new blog in the database.

        Args:
            blog: Validated blog payload
            user_id: UUID of the creating user, if any

        Returns:
            BlogDB: Created blog database model
        """
        db_blog = BlogDB(
            title=blog.title,
            author=blog.author,
            url=blog.url,
            likes=blog.likes,
            user_id=user_id,
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info(f"Blog {db_blog.id} created")
        return db_blog

    async def get_all(self) -> list[BlogDB]:
        """
        Get every blog in creation order.

        Returns:
            list[BlogDB]: All blogs
        """
        # pyrefly: ignore [bad-argument-type]
        statement = select(BlogDB).order_by(BlogDB.created_at, BlogDB.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_all_with_users(self) -> list[BlogWithUser]:
        """
        Get every blog together with the user who created it.

        Returns:
            list[BlogWithUser]: Pairs of blog and creator (None when unknown)
        """
        statement = (
            select(BlogDB, UserDB)
            # pyrefly: ignore [bad-argument-type]
            .outerjoin(UserDB, BlogDB.user_id == UserDB.uuid)
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)
        return [(blog, user) for blog, user in result.all()]

    async def get_with_user(self, blog_id: UUID) -> BlogWithUser | None:
        """
        Get one blog together with the user who created it.

        Args:
            blog_id: Blog UUID

        Returns:
            BlogWithUser | None: Blog and creator, or None if the blog is missing
        """
        statement = (
            select(BlogDB, UserDB)
            # pyrefly: ignore [bad-argument-type]
            .outerjoin(UserDB, BlogDB.user_id == UserDB.uuid)
            # pyrefly: ignore [bad-argument-type]
            .where(BlogDB.id == blog_id)
        )
        result = await self.session.execute(statement)
        row = result.one_or_none()
        if row is None:
            return None
        blog, user = row
        return blog, user

    async def get_by_user_ids(self, user_ids: list[UUID]) -> list[BlogDB]:
        """
        Get the blogs created by any of the given users.

        Args:
            user_ids: Creator UUIDs

        Returns:
            list[BlogDB]: Matching blogs in creation order
        """
        if not user_ids:
            return []

        statement = (
            select(BlogDB)
            # pyrefly: ignore [missing-attribute]
            .where(BlogDB.user_id.in_(user_ids))
            # pyrefly: ignore [bad-argument-type]
            .order_by(BlogDB.created_at, BlogDB.id)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, blog_id: UUID, blog_update: BlogUpdate) -> BlogDB | None:
        """
        Replace the fields sent by the client and stamp the update time.

        Args:
            blog_id: Blog UUID
            blog_update: Fields to update

        Returns:
            BlogDB | None: Updated blog if found, None otherwise
        """
        return await super().update(blog_id, blog_update, updated_at=datetime.now(tz=UTC))
