# tests/routes/conftest.py
"""Pytest fixtures for route tests backed by an in-memory SQLite database."""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from bloglist.db import get_session
from bloglist.main import app

type AuthHeaders = dict[str, str]
type UserFactory = Callable[..., Awaitable[AuthHeaders]]
type BlogFactory = Callable[..., Awaitable[dict]]


@pytest.fixture
async def client(test_engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client whose requests use the test database."""
    session_maker = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides = {}


@pytest.fixture
def create_user(client: AsyncClient) -> UserFactory:
    """Register a user through the API, log in and return auth headers."""

    async def _create(
        username: str = "mluukkai",
        name: str = "Matti Luukkainen",
        password: str = "salainen",
    ) -> AuthHeaders:
        response = await client.post(
            "/api/users",
            json={"username": username, "name": name, "password": password},
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            "/api/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _create


@pytest.fixture
async def auth_headers(create_user: UserFactory) -> AuthHeaders:
    """Auth headers of the default test user."""
    return await create_user()


@pytest.fixture
def create_blog(client: AsyncClient) -> BlogFactory:
    """Create a blog through the API and return its JSON body."""

    async def _create(headers: AuthHeaders, **fields: object) -> dict:
        payload = {
            "title": "React patterns",
            "author": "Michael Chan",
            "url": "https://reactpatterns.com/",
            "likes": 7,
        }
        payload.update(fields)
        response = await client.post("/api/blogs", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create
