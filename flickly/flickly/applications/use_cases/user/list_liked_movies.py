from flickly.applications.interfaces.dtos.movie import MovieList, MoviePublic
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class ListLikedMoviesUseCase:
    def __init__(self, user_repository: UserRepository, movie_repository: MovieRepository):
        self.user_repository = user_repository
        self.movie_repository = movie_repository

    async def execute(self, user_id: int) -> MovieList:
        liked_movie_ids = await self.user_repository.get_liked_movie_ids(user_id)
        movies = {movie.id: movie for movie in await self.movie_repository.get_by_ids(liked_movie_ids)}

        return MovieList(
            movies=[MoviePublic.model_validate(movies[movie_id]) for movie_id in liked_movie_ids if movie_id in movies]
        )
