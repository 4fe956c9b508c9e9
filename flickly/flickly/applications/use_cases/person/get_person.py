from flickly.applications.interfaces.dtos.person import PersonDetail, PersonPublic
from flickly.applications.interfaces.dtos.summary import MovieSummary
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository


class GetPersonUseCase:
    def __init__(self, person_repository: PersonRepository, movie_repository: MovieRepository):
        self.person_repository = person_repository
        self.movie_repository = movie_repository

    async def execute(self, person_id: int) -> PersonDetail:
        person = await self.person_repository.get_by_id(person_id)
        if not person:
            raise NotFoundError(f"Person with id {person_id} not found")

        movies = await self.movie_repository.get_by_ids(person.movie_ids)

        return PersonDetail(
            **PersonPublic.model_validate(person).model_dump(),
            movies=[MovieSummary.model_validate(movie) for movie in movies],
        )
