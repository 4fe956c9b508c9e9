from typing import List

from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository


async def ensure_people_exist(person_repository: PersonRepository, person_ids: List[int]) -> None:
    if not person_ids:
        return
    people = await person_repository.get_by_ids(person_ids)
    missing_ids = sorted(set(person_ids) - {person.id for person in people})
    if missing_ids:
        raise NotFoundError(f"People not found: {', '.join(str(i) for i in missing_ids)}")


async def ensure_movies_exist(movie_repository: MovieRepository, movie_ids: List[int]) -> None:
    if not movie_ids:
        return
    movies = await movie_repository.get_by_ids(movie_ids)
    missing_ids = sorted(set(movie_ids) - {movie.id for movie in movies})
    if missing_ids:
        raise NotFoundError(f"Movies not found: {', '.join(str(i) for i in missing_ids)}")
