from functools import lru_cache
from http import HTTPStatus
from typing import Annotated

from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.applications.services.recommendation_application_service import RecommendationApplicationService
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.auth_service import AuthService
from flickly.domain.ports.services.logger import LoggerPort
from flickly.domain.ports.services.login_rate_limiter import LoginRateLimiter
from flickly.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from flickly.infrastructure.adapters.repositories.sqlalchemy_friendship_repository import (
    SQLAlchemyFriendshipRepository,
)
from flickly.infrastructure.adapters.repositories.sqlalchemy_movie_repository import SQLAlchemyMovieRepository
from flickly.infrastructure.adapters.repositories.sqlalchemy_person_repository import SQLAlchemyPersonRepository
from flickly.infrastructure.adapters.repositories.sqlalchemy_review_repository import SQLAlchemyReviewRepository
from flickly.infrastructure.adapters.repositories.sqlalchemy_user_repository import SQLAlchemyUserRepository
from flickly.infrastructure.adapters.services.in_memory_login_rate_limiter import InMemoryLoginRateLimiter
from flickly.infrastructure.adapters.services.jwt_auth_service import JWTAuthService
from flickly.infrastructure.config.settings import RecommendationSettings, Settings
from flickly.infrastructure.logging.std_logger_adapter import StdLoggerAdapter
from flickly.infrastructure.persistence.database import get_session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token")


def get_logger() -> LoggerPort:
    return StdLoggerAdapter("flickly.recommendations")


def get_settings() -> Settings:
    return Settings()


def get_recommendation_settings() -> RecommendationSettings:
    return RecommendationSettings()


def get_user_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> UserRepository:
    return SQLAlchemyUserRepository(session)


def get_movie_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> MovieRepository:
    return SQLAlchemyMovieRepository(session)


def get_person_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> PersonRepository:
    return SQLAlchemyPersonRepository(session)


def get_review_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> ReviewRepository:
    return SQLAlchemyReviewRepository(session)


def get_friendship_repository(session: Annotated[AsyncSession, Depends(get_session)]) -> FriendshipRepository:
    return SQLAlchemyFriendshipRepository(session)


def get_auth_service(
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthService:
    return JWTAuthService(user_repository, settings)


@lru_cache
def get_login_rate_limiter() -> LoginRateLimiter:
    """Process-wide limiter; failed attempts must survive across requests"""
    settings = Settings()
    return InMemoryLoginRateLimiter(
        max_attempts=settings.LOGIN_MAX_ATTEMPTS, window_seconds=settings.LOGIN_WINDOW_SECONDS
    )


async def get_current_user(
    token: Annotated[str, Depends(oauth2_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    user = await auth_service.get_current_user(token)
    if not user:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_recommendation_service(
    movie_repository: Annotated[MovieRepository, Depends(get_movie_repository)],
    user_repository: Annotated[UserRepository, Depends(get_user_repository)],
    review_repository: Annotated[ReviewRepository, Depends(get_review_repository)],
    friendship_repository: Annotated[FriendshipRepository, Depends(get_friendship_repository)],
    logger: Annotated[LoggerPort, Depends(get_logger)],
) -> RecommendationApplicationServicePort:
    return RecommendationApplicationService(
        movie_repository=movie_repository,
        user_repository=user_repository,
        review_repository=review_repository,
        friendship_repository=friendship_repository,
        logger=logger,
    )
