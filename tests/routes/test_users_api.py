"""Tests for the /api/users endpoints."""

from collections.abc import Awaitable, Callable

import pytest
from httpx import AsyncClient

type AuthHeaders = dict[str, str]
type BlogFactory = Callable[..., Awaitable[dict]]


class TestCreateUser:
    """Registering users."""

    @pytest.mark.asyncio
    async def test_creation_succeeds_with_fresh_username(self, client: AsyncClient) -> None:
        """A new user is created and listed."""
        response = await client.post(
            "/api/users",
            json={"username": "mluukkai", "name": "Matti Luukkainen", "password": "salainen"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["username"] == "mluukkai"
        assert body["name"] == "Matti Luukkainen"
        assert body["blogs"] == []
        assert "id" in body
        assert "password" not in body
        assert "password_hash" not in body

        usernames = [user["username"] for user in (await client.get("/api/users")).json()]
        assert usernames == ["mluukkai"]

    @pytest.mark.asyncio
    async def test_duplicate_username_is_400(self, client: AsyncClient) -> None:
        """Usernames must be unique."""
        payload = {"username": "root", "name": "Superuser", "password": "salainen"}
        assert (await client.post("/api/users", json=payload)).status_code == 201

        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert "expected `username` to be unique" in response.json()["detail"]
        assert len((await client.get("/api/users")).json()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "ab", "password": "salainen"},
            {"username": "  ab", "password": "salainen"},
            {"username": "   ", "password": "salainen"},
            {"username": "root", "password": "pw"},
            {"password": "salainen"},
            {"username": "root"},
        ],
    )
    async def test_invalid_user_is_400(self, client: AsyncClient, payload: dict) -> None:
        """Username and password need at least three characters."""
        response = await client.post("/api/users", json=payload)

        assert response.status_code == 400
        assert (await client.get("/api/users")).json() == []

    @pytest.mark.asyncio
    async def test_username_is_stored_without_surrounding_spaces(
        self,
        client: AsyncClient,
    ) -> None:
        """Leading and trailing spaces are dropped before storing."""
        response = await client.post(
            "/api/users",
            json={"username": "  root  ", "name": " Superuser ", "password": "salainen"},
        )

        assert response.status_code == 201
        assert response.json()["username"] == "root"
        assert response.json()["name"] == "Superuser"

        login = await client.post(
            "/api/login",
            json={"username": "root", "password": "salainen"},
        )
        assert login.status_code == 200

    @pytest.mark.asyncio
    async def test_padded_duplicate_username_is_400(self, client: AsyncClient) -> None:
        """A taken username padded with spaces is still a duplicate."""
        payload = {"username": "root", "password": "salainen"}
        assert (await client.post("/api/users", json=payload)).status_code == 201

        response = await client.post(
            "/api/users",
            json={"username": " root ", "password": "salainen"},
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_password_is_never_echoed(self, client: AsyncClient) -> None:
        """Validation errors omit the submitted password."""
        response = await client.post("/api/users", json={"username": "root", "password": "pw"})

        assert "pw" not in response.text


class TestGetUsers:
    """Listing users."""

    @pytest.mark.asyncio
    async def test_users_include_their_blogs(
        self,
        client: AsyncClient,
        auth_headers: AuthHeaders,
        create_blog: BlogFactory,
    ) -> None:
        """Each user lists the blogs they created."""
        blog = await create_blog(auth_headers, title="Type wars", likes=2)

        users = (await client.get("/api/users")).json()

        assert len(users) == 1
        assert users[0]["blogs"] == [
            {
                "id": blog["id"],
                "title": "Type wars",
                "author": blog["author"],
                "url": blog["url"],
                "likes": 2,
            },
        ]
