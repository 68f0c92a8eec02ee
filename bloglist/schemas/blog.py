"""
Blog schemas for the bloglist application.

Request bodies are validated here; a blog needs a non-empty title and url,
and likes default to zero when the client leaves them out.
"""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

TitleStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
AuthorStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
UrlStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=500)]

# Largest value a 64-bit INTEGER column holds
MAX_LIKES = 2**63 - 1


class BlogCreate(BaseModel):
    """Blog creation model (request body)."""

    title: TitleStr = Field(
        ...,
        description="Blog title",
        examples=["React patterns"],
    )
    author: AuthorStr = Field(
        default="",
        description="Name of the blog's author",
        examples=["Michael Chan"],
    )
    url: UrlStr = Field(
        ...,
        description="Blog URL",
        examples=["https://reactpatterns.com/"],
    )
    likes: int = Field(
        default=0,
        ge=0,
        le=MAX_LIKES,
        description="Number of likes (defaults to 0)",
        examples=[7],
    )

    @field_validator("likes", mode="before")
    @classmethod
    def default_missing_likes(cls, value: object) -> object:
        """Treat an explicit null like an absent value."""
        return 0 if value is None else value


class BlogUpdate(BaseModel):
    """Blog update model; only the fields sent by the client are applied."""

    title: TitleStr | None = Field(default=None, description="Blog title")
    author: AuthorStr | None = Field(default=None, description="Name of the blog's author")
    url: UrlStr | None = Field(default=None, description="Blog URL")
    likes: int | None = Field(default=None, ge=0, le=MAX_LIKES, description="Number of likes")


class BlogUserInfo(BaseModel):
    """Creator information embedded in blog responses (no credentials)."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    uuid: UUID = Field(alias="id")
    username: str
    name: str | None = None


class BlogResponse(BaseModel):
    """Blog as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int
    user: BlogUserInfo | None = None
