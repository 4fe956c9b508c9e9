from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.services.movie_rating_service import MovieRatingService
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.services.permissions import can_delete_user


class DeleteUserUseCase:
    def __init__(
        self,
        user_repository: UserRepository,
        review_repository: ReviewRepository,
        movie_repository: MovieRepository,
    ):
        self.user_repository = user_repository
        self.review_repository = review_repository
        self.rating_service = MovieRatingService(review_repository, movie_repository)

    async def execute(self, actor: User, user_id: int) -> Message:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError("User not found")

        if not can_delete_user(actor, existing_user):
            raise PermissionDeniedError("Not enough permissions")

        # reviews are removed along with the user
        reviews = await self.review_repository.get_by_user_id(user_id)
        reviewed_movie_ids = sorted({review.movie_id for review in reviews})

        success = await self.user_repository.delete(user_id)
        if not success:
            raise RuntimeError("Failed to delete user")

        for movie_id in reviewed_movie_ids:
            await self.rating_service.refresh(movie_id)

        return Message(message="User deleted")
