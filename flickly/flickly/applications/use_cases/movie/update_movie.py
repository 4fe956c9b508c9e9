from flickly.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from flickly.applications.services.catalog_links import ensure_people_exist
from flickly.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.services.permissions import can_manage_catalog


class UpdateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, person_repository: PersonRepository):
        self.movie_repository = movie_repository
        self.person_repository = person_repository

    async def execute(self, actor: User, movie_id: int, movie_data: MovieSchema) -> MoviePublic:
        if not can_manage_catalog(actor):
            raise PermissionDeniedError("Only administrators can edit movies")

        existing_movie = await self.movie_repository.get_by_id(movie_id)
        if not existing_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        title = movie_data.title.strip()
        title_conflict = await self.movie_repository.get_by_title(title)
        if title_conflict and title_conflict.id != movie_id:
            raise ConflictError(f"Movie with title '{title}' already exists")

        await ensure_people_exist(self.person_repository, movie_data.people_ids)

        updated_movie = existing_movie.model_copy(
            update={
                "title": title,
                "genre": movie_data.genre,
                "year": movie_data.year,
                "description": movie_data.description,
                "cover_url": movie_data.cover_url,
                "people_ids": movie_data.people_ids,
            }
        )

        result = await self.movie_repository.update(updated_movie)

        return MoviePublic.model_validate(result)
