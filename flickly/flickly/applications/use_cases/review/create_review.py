from flickly.applications.interfaces.dtos.review import ReviewPublic, ReviewSchema
from flickly.applications.services.movie_rating_service import MovieRatingService
from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.review import Review
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.services.validators import validate_rating
from flickly.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class CreateReviewUseCase:
    def __init__(self, review_repository: ReviewRepository, movie_repository: MovieRepository):
        self.review_repository = review_repository
        self.movie_repository = movie_repository
        self.rating_service = MovieRatingService(review_repository, movie_repository)

    async def execute(self, author: User, review_data: ReviewSchema) -> ReviewPublic:
        validate_rating(review_data.rating)

        movie = await self.movie_repository.get_by_id(review_data.movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {review_data.movie_id} not found")

        review = Review(
            user_id=author.id,
            movie_id=movie.id,
            title=review_data.title.strip(),
            body=review_data.body.strip(),
            rating=review_data.rating,
        )
        created_review = await self.review_repository.create(review)

        rating = await self.rating_service.refresh(movie.id)
        logger.info(f"Review {created_review.id} added to movie {movie.id}, rating is now {rating}")

        return ReviewPublic.model_validate(created_review)
