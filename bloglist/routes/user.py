# bloglist/routes/user.py

"""User routes for registering accounts and listing users with their blogs."""

from collections import defaultdict
from logging import getLogger
from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_201_CREATED

from bloglist.configs import file_logger
from bloglist.dependencies import BlogRepoDep, UserRepoDep
from bloglist.models import BlogDB
from bloglist.schemas import UserBlogInfo, UserCreate, UserResponse

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = file_logger(getLogger(__name__))

USER_EXAMPLE = {
    "id": "123e4567-e89b-12d3-a456-426614174000",
    "username": "mluukkai",
    "name": "Matti Luukkainen",
    "blogs": [],
}


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    status_code=HTTP_201_CREATED,
    summary="Register a new user",
    description="Create a user account. Username and password need at least 3 characters.",
    responses={
        201: {"content": {"application/json": {"example": USER_EXAMPLE}}},
        400: {
            "description": "Invalid input or username taken",
            "content": {
                "application/json": {
                    "example": {"detail": "expected `username` to be unique"},
                },
            },
        },
    },
    operation_id="users_create",
)
async def create_user(user: UserCreate, repo: UserRepoDep) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    user : UserCreate
        Username, display name and plaintext password.
    repo : UserRepository
        Repository dependency.

    Returns
    -------
    UserResponse
        Created user without any blogs.

    Raises
    ------
    DuplicateEntryError
        If the username is already taken.
    """
    db_user = await repo.create(user)
    logger.info(f"User {db_user.username} registered")
    return UserResponse(id=db_user.uuid, username=db_user.username, name=db_user.name)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[UserResponse],
    summary="Get all users",
    description="Retrieve every user together with the blogs they created.",
    responses={
        200: {"content": {"application/json": {"example": [USER_EXAMPLE]}}},
    },
    operation_id="users_get_all",
)
async def get_users(repo: UserRepoDep, blog_repo: BlogRepoDep) -> list[UserResponse]:
    """
    Get all users with their blogs.

    Parameters
    ----------
    repo : UserRepository
        User repository dependency.
    blog_repo : BlogRepository
        Blog repository dependency.

    Returns
    -------
    list[UserResponse]
        Users in registration order.
    """
    users = await repo.get_all()
    blogs = await blog_repo.get_by_user_ids([user.uuid for user in users])

    blogs_by_user: defaultdict[UUID, list[BlogDB]] = defaultdict(list)
    for blog in blogs:
        if blog.user_id is not None:
            blogs_by_user[blog.user_id].append(blog)

    return [
        UserResponse(
            id=user.uuid,
            username=user.username,
            name=user.name,
            blogs=[UserBlogInfo.model_validate(b) for b in blogs_by_user[user.uuid]],
        )
        for user in users
    ]
