from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError

from flickly.domain.exceptions import DataUnavailableError, NotFoundError
from flickly.domain.models.movie import Movie
from flickly.domain.models.recommendation import RankedMovie, RecommendationPage, ScoringSettings
from flickly.domain.models.review import Review
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.logger import LoggerPort
from flickly.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from flickly.domain.services.ranker import get_page, total_pages
from flickly.domain.services.recommendation_service import RecommendationService

Snapshot = Tuple[User, List[Movie], List[Review], List[User]]


class RecommendationApplicationService(RecommendationApplicationServicePort):
    """Application service for content-based recommendations"""

    def __init__(
        self,
        movie_repository: MovieRepository,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
        friendship_repository: FriendshipRepository,
        logger: LoggerPort,
    ):
        self.movie_repository = movie_repository
        self.user_repository = user_repository
        self.review_repository = review_repository
        self.friendship_repository = friendship_repository
        self.logger = logger
        self._domain_service = RecommendationService(logger=logger)

    async def _load_snapshot(self, user_id: int) -> Snapshot:
        """Fetch everything one scoring pass reads, or fail before any scoring happens"""
        try:
            viewer = await self.user_repository.get_by_id(user_id)
            if not viewer:
                raise NotFoundError(f"User {user_id} not found")

            viewer.liked_movie_ids = await self.user_repository.get_liked_movie_ids(user_id)
            viewer.friend_ids = await self.friendship_repository.get_friend_ids(user_id)

            friends = await self.user_repository.get_by_ids(viewer.friend_ids)
            friend_likes = await self.user_repository.get_liked_movie_map(viewer.friend_ids)
            for friend in friends:
                friend.liked_movie_ids = friend_likes.get(friend.id, [])

            movies = await self.movie_repository.get_catalog()
            reviews = await self.review_repository.get_by_user_ids([user_id, *viewer.friend_ids])
        except SQLAlchemyError as e:
            self.logger.bind(user_id=user_id).error(f"Could not load recommendation data: {e}")
            raise DataUnavailableError("Recommendation data is temporarily unavailable") from e

        return viewer, movies, reviews, friends

    async def generate_recommendations(self, user_id: int, settings: ScoringSettings) -> List[RankedMovie]:
        log = self.logger.bind(user_id=user_id)
        log.info("Generating recommendations")

        viewer, movies, reviews, friends = await self._load_snapshot(user_id)
        log.debug(f"Loaded {len(movies)} movies, {len(reviews)} reviews and {len(friends)} friends")

        return self._domain_service.generate_recommendations(
            viewer=viewer, movies=movies, reviews=reviews, users=friends, settings=settings
        )

    async def get_recommendation_page(
        self, user_id: int, settings: ScoringSettings, page: int = 1, page_size: int = 20
    ) -> RecommendationPage:
        ranked = await self.generate_recommendations(user_id, settings)
        recommendations = get_page(ranked, page, page_size)

        return RecommendationPage(
            user_id=user_id,
            page=page,
            page_size=page_size,
            total_items=len(ranked),
            total_pages=total_pages(len(ranked), page_size),
            settings=settings,
            recommendations=recommendations,
        )
