from flickly.applications.interfaces.dtos.message import Message
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.user_repository import UserRepository


class RemoveWatchedMovieUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int, movie_id: int) -> Message:
        removed = await self.user_repository.remove_watched_movie(user_id, movie_id)
        if not removed:
            raise NotFoundError(f"Movie with id {movie_id} is not in your watchlist")

        return Message(message="Movie removed from your watchlist")
