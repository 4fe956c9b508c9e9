from flickly.applications.interfaces.dtos.review import ReviewPublic, ReviewUpdate
from flickly.applications.services.movie_rating_service import MovieRatingService
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.services.permissions import can_modify_review
from flickly.domain.services.validators import validate_rating


class UpdateReviewUseCase:
    def __init__(self, review_repository: ReviewRepository, movie_repository: MovieRepository):
        self.review_repository = review_repository
        self.rating_service = MovieRatingService(review_repository, movie_repository)

    async def execute(self, actor: User, review_id: int, review_data: ReviewUpdate) -> ReviewPublic:
        existing_review = await self.review_repository.get_by_id(review_id)
        if not existing_review:
            raise NotFoundError(f"Review with id {review_id} not found")

        if not can_modify_review(actor, existing_review):
            raise PermissionDeniedError("Not enough permissions")

        changes = review_data.model_dump(exclude_unset=True, exclude_none=True)
        if "rating" in changes:
            validate_rating(changes["rating"])
        for field in ("title", "body"):
            if field in changes:
                changes[field] = changes[field].strip()

        updated_review = await self.review_repository.update(existing_review.model_copy(update=changes))
        await self.rating_service.refresh(updated_review.movie_id)

        return ReviewPublic.model_validate(updated_review)
