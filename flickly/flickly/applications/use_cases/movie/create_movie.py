from flickly.applications.interfaces.dtos.movie import MoviePublic, MovieSchema
from flickly.applications.services.catalog_links import ensure_people_exist
from flickly.domain.exceptions import ConflictError, PermissionDeniedError
from flickly.domain.models.movie import Movie
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.services.permissions import can_manage_catalog


class CreateMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, person_repository: PersonRepository):
        self.movie_repository = movie_repository
        self.person_repository = person_repository

    async def execute(self, actor: User, movie_data: MovieSchema) -> MoviePublic:
        if not can_manage_catalog(actor):
            raise PermissionDeniedError("Only administrators can add movies")

        title = movie_data.title.strip()
        existing_movie = await self.movie_repository.get_by_title(title)
        if existing_movie:
            raise ConflictError(f"Movie with title '{title}' already exists")

        await ensure_people_exist(self.person_repository, movie_data.people_ids)

        movie = Movie(
            title=title,
            genre=movie_data.genre,
            year=movie_data.year,
            description=movie_data.description,
            cover_url=movie_data.cover_url,
            rating=0.0,
            people_ids=movie_data.people_ids,
        )

        created_movie = await self.movie_repository.create(movie)

        return MoviePublic.model_validate(created_movie)
