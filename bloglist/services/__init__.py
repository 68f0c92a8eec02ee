from bloglist.services.auth import AuthService
from bloglist.services.blog_stats import (
    BlogRecord,
    blog_statistics,
    favourite_blog,
    most_blogs,
    most_likes,
    total_likes,
)

__all__ = [
    "AuthService",
    "BlogRecord",
    "blog_statistics",
    "favourite_blog",
    "most_blogs",
    "most_likes",
    "total_likes",
]
