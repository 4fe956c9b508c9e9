from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.interfaces.dtos.movie import (
    GenreList,
    MovieDetail,
    MovieFilter,
    MoviePage,
    MoviePublic,
    MovieSchema,
)
from flickly.applications.interfaces.dtos.review import ReviewList
from flickly.applications.use_cases.movie.create_movie import CreateMovieUseCase
from flickly.applications.use_cases.movie.delete_movie import DeleteMovieUseCase
from flickly.applications.use_cases.movie.get_movie import GetMovieUseCase
from flickly.applications.use_cases.movie.get_movies import GetMoviesUseCase
from flickly.applications.use_cases.movie.list_genres import ListGenresUseCase
from flickly.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from flickly.applications.use_cases.review.list_reviews import ListReviewsUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.infrastructure.config.dependencies import (
    get_current_user,
    get_movie_repository,
    get_person_repository,
    get_review_repository,
)
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/movies", tags=["movies"])

MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
PersonRepositoryDep = Annotated[PersonRepository, Depends(get_person_repository)]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
CurrentUser = Annotated[User, Depends(get_current_user)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=MoviePublic)
async def create_movie(
    movie: MovieSchema,
    current_user: CurrentUser,
    movie_repository: MovieRepositoryDep,
    person_repository: PersonRepositoryDep,
):
    try:
        use_case = CreateMovieUseCase(movie_repository, person_repository)
        return await use_case.execute(current_user, movie)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/", response_model=MoviePage)
async def read_movies(filter_movies: Annotated[MovieFilter, Query()], movie_repository: MovieRepositoryDep):
    use_case = GetMoviesUseCase(movie_repository)
    return await use_case.execute(filter_movies)


@router.get("/genres", response_model=GenreList)
async def read_genres(movie_repository: MovieRepositoryDep):
    use_case = ListGenresUseCase(movie_repository)
    return await use_case.execute()


@router.get("/{movie_id}", response_model=MovieDetail)
async def read_movie(movie_id: int, movie_repository: MovieRepositoryDep, person_repository: PersonRepositoryDep):
    try:
        use_case = GetMovieUseCase(movie_repository, person_repository)
        return await use_case.execute(movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{movie_id}/reviews", response_model=ReviewList)
async def read_movie_reviews(
    movie_id: int, review_repository: ReviewRepositoryDep, movie_repository: MovieRepositoryDep
):
    try:
        use_case = ListReviewsUseCase(review_repository, movie_repository=movie_repository)
        return await use_case.execute(movie_id=movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{movie_id}", response_model=MoviePublic)
async def update_movie(
    movie_id: int,
    movie: MovieSchema,
    current_user: CurrentUser,
    movie_repository: MovieRepositoryDep,
    person_repository: PersonRepositoryDep,
):
    try:
        use_case = UpdateMovieUseCase(movie_repository, person_repository)
        return await use_case.execute(current_user, movie_id, movie)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{movie_id}", response_model=Message)
async def delete_movie(movie_id: int, current_user: CurrentUser, movie_repository: MovieRepositoryDep):
    try:
        use_case = DeleteMovieUseCase(movie_repository)
        return await use_case.execute(current_user, movie_id)
    except DomainError as e:
        raise to_http_exception(e)
