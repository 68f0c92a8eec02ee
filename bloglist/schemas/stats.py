"""Result shapes of the blog statistics engine."""

from pydantic import BaseModel, ConfigDict, Field


class FavouriteBlog(BaseModel):
    """Projection of the most liked blog."""

    title: str
    author: str
    likes: int


class AuthorBlogCount(BaseModel):
    """Author with the most blogs and how many they wrote."""

    author: str
    blogs: int


class AuthorLikes(BaseModel):
    """Author whose blogs collected the most likes, with the total."""

    author: str
    likes: int


class BlogStatistics(BaseModel):
    """All aggregates over one list of blogs."""

    model_config = ConfigDict(populate_by_name=True)

    total_likes: int = Field(alias="totalLikes")
    favourite_blog: FavouriteBlog | None = Field(default=None, alias="favouriteBlog")
    most_blogs: AuthorBlogCount | None = Field(default=None, alias="mostBlogs")
    most_likes: AuthorLikes | None = Field(default=None, alias="mostLikes")
