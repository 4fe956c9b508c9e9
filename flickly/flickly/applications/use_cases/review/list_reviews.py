from typing import Optional

from flickly.applications.interfaces.dtos.review import ReviewList, ReviewPublic
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class ListReviewsUseCase:
    """Lists reviews newest first, optionally narrowed to one movie or one author"""

    def __init__(
        self,
        review_repository: ReviewRepository,
        movie_repository: Optional[MovieRepository] = None,
        user_repository: Optional[UserRepository] = None,
    ):
        self.review_repository = review_repository
        self.movie_repository = movie_repository
        self.user_repository = user_repository

    async def execute(self, movie_id: Optional[int] = None, user_id: Optional[int] = None) -> ReviewList:
        if movie_id is not None:
            if self.movie_repository and not await self.movie_repository.get_by_id(movie_id):
                raise NotFoundError(f"Movie with id {movie_id} not found")
            reviews = await self.review_repository.get_by_movie_id(movie_id)
        elif user_id is not None:
            if self.user_repository and not await self.user_repository.get_by_id(user_id):
                raise NotFoundError("User not found")
            reviews = await self.review_repository.get_by_user_id(user_id)
        else:
            reviews = await self.review_repository.get_all()

        return ReviewList(reviews=[ReviewPublic.model_validate(review) for review in reviews])
