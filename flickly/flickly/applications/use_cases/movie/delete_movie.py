from flickly.applications.interfaces.dtos.message import Message
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.services.permissions import can_manage_catalog


class DeleteMovieUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, actor: User, movie_id: int) -> Message:
        if not can_manage_catalog(actor):
            raise PermissionDeniedError("Only administrators can delete movies")

        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        success = await self.movie_repository.delete(movie_id)
        if not success:
            raise RuntimeError(f"Failed to delete movie with id {movie_id}")

        return Message(message=f"Movie '{existing_movie.title}' deleted successfully")
