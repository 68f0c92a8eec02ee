"""User schemas for account creation and listing."""

from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, SecretStr, StringConstraints

UsernameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=50)]
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=200)]


class UserCreate(BaseModel):
    """User creation model (request body)."""

    model_config = ConfigDict(frozen=True)

    username: UsernameStr = Field(
        ...,
        description="Username (unique, at least 3 characters)",
        examples=["mluukkai"],
    )
    name: NameStr | None = Field(
        default=None,
        description="Display name",
        examples=["Matti Luukkainen"],
    )
    password: SecretStr = Field(
        ...,
        min_length=3,
        description="Password (at least 3 characters)",
        examples=["salainen"],
    )


class UserBlogInfo(BaseModel):
    """Blog summary embedded in user responses."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    author: str
    url: str
    likes: int


class UserResponse(BaseModel):
    """User as returned by the API, with the blogs they created."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    uuid: UUID = Field(alias="id")
    username: str
    name: str | None = None
    blogs: list[UserBlogInfo] = Field(default_factory=list)
