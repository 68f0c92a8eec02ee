# bloglist/dependencies/__init__.py

from bloglist.dependencies.dependencies import (
    AuthServiceDep,
    BlogRepoDep,
    SessionDep,
    UserDBDep,
    UserRepoDep,
    get_auth_service,
    get_blog_repository,
    get_current_user,
    get_user_repository,
    oauth2_scheme,
)

__all__ = [
    "AuthServiceDep",
    "BlogRepoDep",
    "SessionDep",
    "UserDBDep",
    "UserRepoDep",
    "get_auth_service",
    "get_blog_repository",
    "get_current_user",
    "get_user_repository",
    "oauth2_scheme",
]
