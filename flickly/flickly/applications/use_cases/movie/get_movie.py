from flickly.applications.interfaces.dtos.movie import MovieDetail, MoviePublic
from flickly.applications.interfaces.dtos.summary import PersonSummary
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository


class GetMovieUseCase:
    def __init__(self, movie_repository: MovieRepository, person_repository: PersonRepository):
        self.movie_repository = movie_repository
        self.person_repository = person_repository

    async def execute(self, movie_id: int) -> MovieDetail:
        movie = await self.movie_repository.get_by_id(movie_id)
        if not movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        people = await self.person_repository.get_by_ids(movie.people_ids)

        return MovieDetail(
            **MoviePublic.model_validate(movie).model_dump(),
            people=[PersonSummary.model_validate(person) for person in people],
        )
