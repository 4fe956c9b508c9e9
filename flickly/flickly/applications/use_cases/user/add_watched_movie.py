from flickly.applications.interfaces.dtos.message import Message
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class AddWatchedMovieUseCase:
    def __init__(self, user_repository: UserRepository, movie_repository: MovieRepository):
        self.user_repository = user_repository
        self.movie_repository = movie_repository

    async def execute(self, user_id: int, movie_id: int) -> Message:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        added = await self.user_repository.add_watched_movie(user_id, movie_id)
        if not added:
            return Message(message=f"Movie '{movie.title}' is already in your watchlist")

        return Message(message=f"Movie '{movie.title}' added to your watchlist")
