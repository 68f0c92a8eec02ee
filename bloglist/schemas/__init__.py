from bloglist.schemas.auth import LoginRequest, LoginResponse, TokenData
from bloglist.schemas.blog import BlogCreate, BlogResponse, BlogUpdate, BlogUserInfo
from bloglist.schemas.health import HealthCheckResponse
from bloglist.schemas.stats import AuthorBlogCount, AuthorLikes, BlogStatistics, FavouriteBlog
from bloglist.schemas.user import UserBlogInfo, UserCreate, UserResponse

__all__ = [
    "AuthorBlogCount",
    "AuthorLikes",
    "BlogCreate",
    "BlogResponse",
    "BlogStatistics",
    "BlogUpdate",
    "BlogUserInfo",
    "FavouriteBlog",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "TokenData",
    "UserBlogInfo",
    "UserCreate",
    "UserResponse",
]
