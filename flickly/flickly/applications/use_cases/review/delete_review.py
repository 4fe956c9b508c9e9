from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.services.movie_rating_service import MovieRatingService
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.services.permissions import can_modify_review


class DeleteReviewUseCase:
    def __init__(self, review_repository: ReviewRepository, movie_repository: MovieRepository):
        self.review_repository = review_repository
        self.rating_service = MovieRatingService(review_repository, movie_repository)

    async def execute(self, actor: User, review_id: int) -> Message:
        existing_review = await self.review_repository.get_by_id(review_id)
        if not existing_review:
            raise NotFoundError(f"Review with id {review_id} not found")

        if not can_modify_review(actor, existing_review):
            raise PermissionDeniedError("Not enough permissions")

        success = await self.review_repository.delete(review_id)
        if not success:
            raise RuntimeError(f"Failed to delete review with id {review_id}")

        await self.rating_service.refresh(existing_review.movie_id)

        return Message(message="Review deleted")
