# bloglist/dependencies/dependencies.py

"""Application dependencies: sessions, repositories and the current user."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from bloglist.db import get_session
from bloglist.models import UserDB
from bloglist.repositories import BlogRepository, UserRepository
from bloglist.services import AuthService

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/login")

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_repository(session: SessionDep) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_blog_repository(session: SessionDep) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]


def get_auth_service(repo: UserRepoDep) -> AuthService:
    """Dependency to get the AuthService bound to the request session."""
    return AuthService(repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth_service: AuthServiceDep,
) -> UserDB:
    """
    Get the user owning the bearer token of the request.

    Parameters
    ----------
    token : str
        Bearer token from the ``Authorization`` header.
    auth_service : AuthService
        Authentication service.

    Returns
    -------
    UserDB
        Current authenticated user.

    Raises
    ------
    InvalidTokenError
        If the token is invalid or its user no longer exists.
    """
    return await auth_service.get_user_from_token(token)


UserDBDep = Annotated[UserDB, Depends(get_current_user)]
