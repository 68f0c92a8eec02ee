"""Blog database model using SQLModel."""

from datetime import UTC, datetime
from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import BigInteger, DateTime, Uuid
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, ForeignKey, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    Title and url are required; likes start at zero. ``user_id`` links the
    blog to the account that created it and is nullable so that blogs
    inserted without a creator remain valid.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    title: str = Field(
        sa_column=Column(String(200), nullable=False),
        description="Blog title",
    )
    author: str = Field(
        default="",
        sa_column=Column(String(100), nullable=False, server_default="", index=True),
        description="Name of the blog's author",
    )
    url: str = Field(
        sa_column=Column(String(500), nullable=False),
        description="Blog URL",
    )
    likes: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, server_default="0"),
        ge=0,
        description="Number of likes",
    )

    user_id: UUID | None = Field(
        default=None,
        sa_column=Column(
            "user_id",
            Uuid,
            ForeignKey("users.uuid", ondelete="SET NULL"),
            nullable=True,
            index=True,
        ),
        description="Creator ID (foreign key to users.uuid)",
    )

    # Timestamps (timezone-aware)
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(tz=UTC),
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Creation timestamp",
    )
    updated_at: datetime | None = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True)),
        description="Last update timestamp",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "title": "Go To Statement Considered Harmful",
                "author": "Edsger W. Dijkstra",
                "url": "https://homepages.cwi.nl/~storm/teaching/reader/Dijkstra68.pdf",
                "likes": 5,
                "user_id": "123e4567-e89b-12d3-a456-426614174000",
            },
        },
    )
