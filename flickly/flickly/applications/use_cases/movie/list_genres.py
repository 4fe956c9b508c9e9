from flickly.applications.interfaces.dtos.movie import GenreList
from flickly.domain.ports.repositories.movie_repository import MovieRepository


class ListGenresUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self) -> GenreList:
        return GenreList(genres=await self.movie_repository.list_genres())
