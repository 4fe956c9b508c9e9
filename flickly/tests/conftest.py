from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.app import app
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.auth_service import AuthService
from flickly.domain.ports.services.logger import LoggerPort
from flickly.infrastructure.adapters.services.in_memory_login_rate_limiter import InMemoryLoginRateLimiter
from flickly.infrastructure.config.dependencies import (
    get_login_rate_limiter,
    get_recommendation_settings,
    get_settings,
)
from flickly.infrastructure.config.settings import RecommendationSettings, Settings
from flickly.infrastructure.persistence.database import build_engine, create_tables, get_session
from flickly.infrastructure.persistence.models import User as SQLUser
from flickly.infrastructure.persistence.models import table_registry

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
DEFAULT_PASSWORD = "password123"


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        SECRET_KEY="test-secret-key-for-testing",
        ALGORITHM="HS256",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
        LOGIN_MAX_ATTEMPTS=10,
        LOGIN_WINDOW_SECONDS=300,
    )


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def engine(self, test_settings):
        """Create an in-memory database shared by every session of one test"""
        engine = build_engine(test_settings)
        await create_tables(engine)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, engine):
        """Create test database session"""
        async with AsyncSession(engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, engine, test_settings):
        """Create test HTTP client with database and settings overrides"""

        async def override_get_session():
            async with AsyncSession(engine, expire_on_commit=False) as session:
                yield session

        rate_limiter = InMemoryLoginRateLimiter(
            max_attempts=test_settings.LOGIN_MAX_ATTEMPTS, window_seconds=test_settings.LOGIN_WINDOW_SECONDS
        )

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_recommendation_settings] = lambda: RecommendationSettings()
        app.dependency_overrides[get_login_rate_limiter] = lambda: rate_limiter

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()

    async def register(self, client, username: str, password: str = DEFAULT_PASSWORD) -> dict:
        response = await client.post(
            "/auth/register",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "nickname": username.capitalize(),
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def login(self, client, username: str, password: str = DEFAULT_PASSWORD) -> dict:
        response = await client.post("/auth/token", data={"username": username, "password": password})
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    async def register_and_login(self, client, username: str) -> tuple:
        user = await self.register(client, username)
        headers = await self.login(client, username)
        return user, headers

    async def set_role(self, engine, user_id: int, role: str) -> None:
        async with AsyncSession(engine) as session:
            await session.execute(update(SQLUser).where(SQLUser.id == user_id).values(role=role))
            await session.commit()

    async def create_admin(self, client, engine, username: str = "admin") -> tuple:
        user, headers = await self.register_and_login(client, username)
        await self.set_role(engine, user["id"], "admin")
        return user, headers

    async def create_movie(self, client, admin_headers: dict, **fields) -> dict:
        payload = {"title": "Untitled", "genre": None, "people_ids": []}
        payload.update(fields)
        response = await client.post("/movies/", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    async def create_person(self, client, admin_headers: dict, **fields) -> dict:
        payload = {"first_name": "Jane", "last_name": "Doe", "profession": "actor", "movie_ids": []}
        payload.update(fields)
        response = await client.post("/people/", json=payload, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()

    async def create_review(self, client, headers: dict, movie_id: int, rating: int, title: str = "Review") -> dict:
        response = await client.post(
            "/reviews/",
            json={"movie_id": movie_id, "title": title, "body": "Some thoughts", "rating": rating},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    async def make_friends(self, client, headers: dict, other_headers: dict, other_id: int) -> None:
        response = await client.post(f"/friends/requests/{other_id}", headers=headers)
        assert response.status_code == 201, response.text
        response = await client.post(f"/friends/requests/{response.json()['id']}/accept", headers=other_headers)
        assert response.status_code == 200, response.text


# Shared fixtures for use case testing
@pytest.fixture
def mock_user_repository():
    """Mock user repository for use case testing"""
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_movie_repository():
    return AsyncMock(spec=MovieRepository)


@pytest.fixture
def mock_person_repository():
    return AsyncMock(spec=PersonRepository)


@pytest.fixture
def mock_review_repository():
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def mock_friendship_repository():
    return AsyncMock(spec=FriendshipRepository)


@pytest.fixture
def mock_auth_service():
    """Mock auth service for use case testing"""
    return MagicMock(spec=AuthService)


@pytest.fixture
def mock_logger():
    return MagicMock(spec=LoggerPort)
