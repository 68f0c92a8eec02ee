# bloglist/routes/blog.py

"""
Blog Routes.

Provides CRUD endpoints for blogs plus aggregate statistics.

Summary
-------
Endpoints include:
  - List blogs
  - Blog statistics
  - Get blog by id
  - Create blog (bearer token required)
  - Update blog
  - Delete blog (bearer token required, creator only)
"""

from logging import getLogger
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Body
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from bloglist.configs import file_logger
from bloglist.dependencies import BlogRepoDep, UserDBDep
from bloglist.errors import NotBlogOwnerError, RecordNotFoundError
from bloglist.models import BlogDB, UserDB
from bloglist.repositories import BlogRepository
from bloglist.schemas import BlogCreate, BlogResponse, BlogStatistics, BlogUpdate, BlogUserInfo
from bloglist.services import blog_statistics

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = file_logger(getLogger(__name__))

BLOG_EXAMPLE = {
    "id": "5a422a85-1b54-4a67-9d03-1f6c1b2c7a01",
    "title": "React patterns",
    "author": "Michael Chan",
    "url": "https://reactpatterns.com/",
    "likes": 7,
    "user": {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "username": "mluukkai",
        "name": "Matti Luukkainen",
    },
}

UNAUTHORIZED_RESPONSE = {
    "description": "Missing or invalid token",
    "content": {"application/json": {"example": {"detail": "token invalid"}}},
}

MALFORMED_ID_RESPONSE = {
    "description": "Malformed blog id",
    "content": {"application/json": {"example": {"detail": "Validation failed", "errors": []}}},
}


def blog_to_response(db_blog: BlogDB, user: UserDB | None = None) -> BlogResponse:
    """
    Convert a `BlogDB` instance and its creator to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.
    user : UserDB | None
        The blog's creator, if known.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse(
        id=db_blog.id,
        title=db_blog.title,
        author=db_blog.author,
        url=db_blog.url,
        likes=db_blog.likes,
        user=BlogUserInfo.model_validate(user, from_attributes=True) if user else None,
    )


async def _blog_or_404(repo: BlogRepository, blog_id: UUID) -> tuple[BlogDB, UserDB | None]:
    found = await repo.get_with_user(blog_id)
    if found is None:
        raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")
    return found


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="Get all blogs",
    description="Retrieve every blog, each with the user who created it.",
    responses={
        200: {"content": {"application/json": {"example": [BLOG_EXAMPLE]}}},
    },
    operation_id="blogs_get_all",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    """
    Get all blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    list[BlogResponse]
        Every stored blog in creation order.
    """
    rows = await repo.get_all_with_users()
    return [blog_to_response(blog, user) for blog, user in rows]


@router.get(
    "/stats",
    response_class=ORJSONResponse,
    response_model=BlogStatistics,
    summary="Get blog statistics",
    description="Total likes, favourite blog, most prolific and most liked author.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "totalLikes": 36,
                        "favouriteBlog": {
                            "title": "Canonical string reduction",
                            "author": "Edsger W. Dijkstra",
                            "likes": 12,
                        },
                        "mostBlogs": {"author": "Robert C. Martin", "blogs": 3},
                        "mostLikes": {"author": "Edsger W. Dijkstra", "likes": 17},
                    },
                },
            },
        },
    },
    operation_id="blogs_statistics",
)
async def get_blog_statistics(repo: BlogRepoDep) -> BlogStatistics:
    """
    Compute aggregate statistics over all stored blogs.

    Parameters
    ----------
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogStatistics
        Aggregates; the optional ones are null when there are no blogs.
    """
    blogs = await repo.get_all()
    return blog_statistics(blogs)


@router.get(
    "/{blog_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    description="Retrieve a single blog by its UUID.",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: MALFORMED_ID_RESPONSE,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: UUID, repo: BlogRepoDep) -> BlogResponse:
    """
    Get blog by ID.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    blog, user = await _blog_or_404(repo, blog_id)
    return blog_to_response(blog, user)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a new blog",
    description="Create a blog attributed to the user owning the bearer token.",
    responses={
        201: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Validation failed",
                        "errors": [
                            {"field": "title", "message": "Field required", "type": "missing"},
                        ],
                    },
                },
            },
        },
        401: UNAUTHORIZED_RESPONSE,
    },
    operation_id="blogs_create",
)
async def create_blog(
    blog: Annotated[
        BlogCreate,
        Body(
            examples=[
                {
                    "title": "React patterns",
                    "author": "Michael Chan",
                    "url": "https://reactpatterns.com/",
                    "likes": 7,
                },
            ],
        ),
    ],
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> BlogResponse:
    """
    Create a new blog.

    Parameters
    ----------
    blog : BlogCreate
        Blog input payload; likes default to 0.
    repo : BlogRepository
        Repository dependency.
    current_user : UserDB
        Owner of the bearer token.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    db_blog = await repo.create(blog, user_id=current_user.uuid)
    return blog_to_response(db_blog, current_user)


@router.put(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Update a blog",
    description="Replace the title, author, url or likes of a blog.",
    responses={
        400: MALFORMED_ID_RESPONSE,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: UUID,
    blog_update: Annotated[
        BlogUpdate,
        Body(examples=[{"likes": 10}]),
    ],
    repo: BlogRepoDep,
) -> Response:
    """
    Update a blog.

    Only the fields present in the body are changed.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    """
    updated = await repo.update(blog_id, blog_update)
    if not updated:
        raise RecordNotFoundError(detail=f"Blog with ID {blog_id} not found")
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.delete(
    "/{blog_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a blog",
    description="Delete a blog. Only the user who created it may do so.",
    responses={
        400: MALFORMED_ID_RESPONSE,
        401: UNAUTHORIZED_RESPONSE,
        404: {
            "description": "Not found",
            "content": {
                "application/json": {"example": {"detail": "Blog with ID <uuid> not found"}},
            },
        },
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    blog_id: UUID,
    repo: BlogRepoDep,
    current_user: UserDBDep,
) -> Response:
    """
    Delete a blog.

    Blogs stored without a creator may be removed by any authenticated user.

    Raises
    ------
    RecordNotFoundError
        If blog not found.
    NotBlogOwnerError
        If the blog belongs to another user.
    """
    blog = await repo.get_or_raise(blog_id)
    if blog.user_id is not None and blog.user_id != current_user.uuid:
        raise NotBlogOwnerError

    await repo.delete(blog_id)
    logger.info(f"Blog {blog_id} deleted by {current_user.username}")
    return Response(status_code=HTTP_204_NO_CONTENT)
