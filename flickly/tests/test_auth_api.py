import pytest
from fastapi import status

from .conftest import DEFAULT_PASSWORD, BaseIntegrationTest


class TestAuthAPI(BaseIntegrationTest):
    """Integration tests for registration and token endpoints"""

    @pytest.mark.asyncio
    async def test_register_success(self, client):
        """Test successful registration stores the '@' username"""
        response = await client.post(
            "/auth/register",
            json={"username": "alice", "email": "Alice@example.com", "nickname": "Alice", "password": "secret123"},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["username"] == "@alice"
        assert data["role"] == "user"
        assert "id" in data
        assert "password" not in data
        assert "password_hash" not in data

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, client):
        """Test registering the same username twice"""
        await self.register(client, "alice")

        response = await client.post(
            "/auth/register",
            json={"username": "@alice", "email": "other@example.com", "nickname": "Other", "password": "secret123"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Username already exists"

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, client):
        await self.register(client, "alice")

        response = await client.post(
            "/auth/register",
            json={"username": "bob", "email": "ALICE@example.com", "nickname": "Bob", "password": "secret123"},
        )

        assert response.status_code == status.HTTP_409_CONFLICT
        assert response.json()["detail"] == "Email already exists"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"username": "bad name", "email": "a@example.com", "nickname": "A", "password": "secret123"},
            {"username": "alice", "email": "a@example.com", "nickname": "A", "password": "short1"},
            {"username": "alice", "email": "a@example.com", "nickname": "A", "password": "nodigitshere"},
            {"username": "alice", "email": "a@example.com", "nickname": "   ", "password": "secret123"},
        ],
    )
    async def test_register_invalid_data(self, client, payload):
        """Test domain validation failures map to 400"""
        response = await client.post("/auth/register", json=payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_register_invalid_email(self, client):
        response = await client.post(
            "/auth/register",
            json={"username": "alice", "email": "invalid-email", "nickname": "A", "password": "secret123"},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    @pytest.mark.asyncio
    async def test_login_success(self, client):
        """Test login returns a bearer token usable on protected routes"""
        await self.register(client, "alice")

        response = await client.post("/auth/token", data={"username": "alice", "password": DEFAULT_PASSWORD})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["token_type"] == "bearer"

        me = await client.get("/users/me", headers={"Authorization": f"Bearer {data['access_token']}"})
        assert me.status_code == status.HTTP_200_OK
        assert me.json()["username"] == "@alice"

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client):
        await self.register(client, "alice")

        response = await client.post("/auth/token", data={"username": "alice", "password": "wrongpass1"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["www-authenticate"] == "Bearer"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client):
        response = await client.post("/auth/token", data={"username": "ghost", "password": DEFAULT_PASSWORD})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_repeated_failures_are_rate_limited(self, client, test_settings):
        """Test the client is locked out after too many failed attempts"""
        await self.register(client, "alice")

        for _ in range(test_settings.LOGIN_MAX_ATTEMPTS):
            response = await client.post("/auth/token", data={"username": "alice", "password": "wrongpass1"})
            assert response.status_code == status.HTTP_401_UNAUTHORIZED

        response = await client.post("/auth/token", data={"username": "alice", "password": DEFAULT_PASSWORD})

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    @pytest.mark.asyncio
    async def test_invalid_token_rejected(self, client):
        response = await client.get("/users/me", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Welcome to Flickly!"}
