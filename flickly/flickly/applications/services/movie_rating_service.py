from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository


class MovieRatingService:
    """Keeps a movie's aggregate rating in step with its reviews"""

    def __init__(self, review_repository: ReviewRepository, movie_repository: MovieRepository):
        self.review_repository = review_repository
        self.movie_repository = movie_repository

    async def refresh(self, movie_id: int) -> float:
        average = await self.review_repository.average_rating(movie_id)
        rating = round(average, 1) if average is not None else 0.0
        await self.movie_repository.update_rating(movie_id, rating)
        return rating
