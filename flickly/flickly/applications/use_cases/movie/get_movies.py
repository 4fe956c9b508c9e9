from flickly.applications.interfaces.dtos.movie import MovieFilter, MoviePage, MoviePublic
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.services.ranker import total_pages


class GetMoviesUseCase:
    def __init__(self, movie_repository: MovieRepository):
        self.movie_repository = movie_repository

    async def execute(self, movie_filter: MovieFilter) -> MoviePage:
        movies, total = await self.movie_repository.search(
            offset=(movie_filter.page - 1) * movie_filter.limit,
            limit=movie_filter.limit,
            search=movie_filter.search.strip() if movie_filter.search else None,
            genre=movie_filter.genre,
            person_id=movie_filter.person_id,
            sort=movie_filter.sort,
        )

        return MoviePage(
            page=movie_filter.page,
            limit=movie_filter.limit,
            total=total,
            total_pages=total_pages(total, movie_filter.limit),
            movies=[MoviePublic.model_validate(movie) for movie in movies],
        )
