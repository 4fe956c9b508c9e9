from flickly.applications.interfaces.dtos.review import ReviewPublic
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.review_repository import ReviewRepository


class GetReviewUseCase:
    def __init__(self, review_repository: ReviewRepository):
        self.review_repository = review_repository

    async def execute(self, review_id: int) -> ReviewPublic:
        review = await self.review_repository.get_by_id(review_id)
        if not review:
            raise NotFoundError(f"Review with id {review_id} not found")

        return ReviewPublic.model_validate(review)
