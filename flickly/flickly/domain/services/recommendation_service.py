from typing import List

from flickly.domain.models.movie import Movie
from flickly.domain.models.recommendation import RankedMovie, ScoringSettings
from flickly.domain.models.review import Review
from flickly.domain.models.user import User
from flickly.domain.ports.services.logger import LoggerPort
from flickly.domain.services.ranker import rank_movies
from flickly.domain.services.scorer import score_movie
from flickly.domain.services.taste_profile_builder import build_taste_profile


class RecommendationService:
    """Domain service for content-based movie recommendations"""

    def __init__(self, logger: LoggerPort):
        self.logger = logger

    def generate_recommendations(
        self,
        viewer: User,
        movies: List[Movie],
        reviews: List[Review],
        users: List[User],
        settings: ScoringSettings,
    ) -> List[RankedMovie]:
        """Score every movie the viewer has not reviewed or liked, best first"""
        profile = build_taste_profile(viewer, movies, reviews, users, settings)
        self.logger.debug(
            f"Taste profile for user {viewer.id}: {len(profile.liked_genres)} genres, "
            f"{len(profile.liked_people_ids)} people, {len(profile.friend_liked_genres)} friend genres, "
            f"{len(profile.friend_liked_people_ids)} friend people"
        )

        candidates = [movie for movie in movies if movie.id not in profile.watched_movie_ids]

        scored = []
        for movie in candidates:
            result = score_movie(movie, profile, settings)
            scored.append(RankedMovie(**movie.model_dump(), **result.model_dump()))

        self.logger.info(f"Scored {len(scored)} candidate movies for user {viewer.id}")
        return rank_movies(scored)
