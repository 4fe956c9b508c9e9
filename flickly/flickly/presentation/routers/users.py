from typing import Annotated

from fastapi import APIRouter, Depends, Query

from flickly.applications.interfaces.dtos.filter_page import FilterPage
from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.interfaces.dtos.movie import MovieList
from flickly.applications.interfaces.dtos.review import ReviewList
from flickly.applications.interfaces.dtos.user import UserList, UserMe, UserProfile, UserPublic, UserUpdateSchema
from flickly.applications.use_cases.review.list_reviews import ListReviewsUseCase
from flickly.applications.use_cases.user.add_watched_movie import AddWatchedMovieUseCase
from flickly.applications.use_cases.user.delete_user import DeleteUserUseCase
from flickly.applications.use_cases.user.get_current_user import GetCurrentUserUseCase
from flickly.applications.use_cases.user.get_user_profile import GetUserProfileUseCase
from flickly.applications.use_cases.user.get_users import GetUsersUseCase
from flickly.applications.use_cases.user.like_movie import LikeMovieUseCase
from flickly.applications.use_cases.user.list_liked_movies import ListLikedMoviesUseCase
from flickly.applications.use_cases.user.list_watched_movies import ListWatchedMoviesUseCase
from flickly.applications.use_cases.user.remove_watched_movie import RemoveWatchedMovieUseCase
from flickly.applications.use_cases.user.unlike_movie import UnlikeMovieUseCase
from flickly.applications.use_cases.user.update_user import UpdateUserUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.infrastructure.config.dependencies import (
    get_current_user,
    get_friendship_repository,
    get_movie_repository,
    get_review_repository,
    get_user_repository,
)
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
FriendshipRepositoryDep = Annotated[FriendshipRepository, Depends(get_friendship_repository)]
CurrentUser = Annotated[User, Depends(get_current_user)]


@router.get("/", response_model=UserList)
async def read_users(filter_users: Annotated[FilterPage, Query()], user_repository: UserRepositoryDep):
    use_case = GetUsersUseCase(user_repository)
    return await use_case.execute(filter_users)


@router.get("/me", response_model=UserMe)
async def read_me(
    current_user: CurrentUser, user_repository: UserRepositoryDep, friendship_repository: FriendshipRepositoryDep
):
    use_case = GetCurrentUserUseCase(user_repository, friendship_repository)
    return await use_case.execute(current_user)


@router.get("/me/likes", response_model=MovieList)
async def read_liked_movies(
    current_user: CurrentUser, user_repository: UserRepositoryDep, movie_repository: MovieRepositoryDep
):
    use_case = ListLikedMoviesUseCase(user_repository, movie_repository)
    return await use_case.execute(current_user.id)


@router.post("/me/likes/{movie_id}", response_model=Message)
async def like_movie(
    movie_id: int, current_user: CurrentUser, user_repository: UserRepositoryDep, movie_repository: MovieRepositoryDep
):
    try:
        use_case = LikeMovieUseCase(user_repository, movie_repository)
        return await use_case.execute(current_user.id, movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/me/likes/{movie_id}", response_model=Message)
async def unlike_movie(movie_id: int, current_user: CurrentUser, user_repository: UserRepositoryDep):
    try:
        use_case = UnlikeMovieUseCase(user_repository)
        return await use_case.execute(current_user.id, movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/me/watched", response_model=MovieList)
async def read_watched_movies(
    current_user: CurrentUser, user_repository: UserRepositoryDep, movie_repository: MovieRepositoryDep
):
    use_case = ListWatchedMoviesUseCase(user_repository, movie_repository)
    return await use_case.execute(current_user.id)


@router.post("/me/watched/{movie_id}", response_model=Message)
async def add_watched_movie(
    movie_id: int, current_user: CurrentUser, user_repository: UserRepositoryDep, movie_repository: MovieRepositoryDep
):
    try:
        use_case = AddWatchedMovieUseCase(user_repository, movie_repository)
        return await use_case.execute(current_user.id, movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/me/watched/{movie_id}", response_model=Message)
async def remove_watched_movie(movie_id: int, current_user: CurrentUser, user_repository: UserRepositoryDep):
    try:
        use_case = RemoveWatchedMovieUseCase(user_repository)
        return await use_case.execute(current_user.id, movie_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}/reviews", response_model=ReviewList)
async def read_user_reviews(
    user_id: int, review_repository: ReviewRepositoryDep, user_repository: UserRepositoryDep
):
    try:
        use_case = ListReviewsUseCase(review_repository, user_repository=user_repository)
        return await use_case.execute(user_id=user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{username}", response_model=UserProfile)
async def read_user_profile(
    username: str, user_repository: UserRepositoryDep, friendship_repository: FriendshipRepositoryDep
):
    try:
        use_case = GetUserProfileUseCase(user_repository, friendship_repository)
        return await use_case.execute(username)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{user_id}", response_model=UserPublic)
async def update_user(
    user_id: int, user: UserUpdateSchema, current_user: CurrentUser, user_repository: UserRepositoryDep
):
    try:
        use_case = UpdateUserUseCase(user_repository)
        return await use_case.execute(current_user, user_id, user)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{user_id}", response_model=Message)
async def delete_user(
    user_id: int,
    current_user: CurrentUser,
    user_repository: UserRepositoryDep,
    review_repository: ReviewRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = DeleteUserUseCase(user_repository, review_repository, movie_repository)
        return await use_case.execute(current_user, user_id)
    except DomainError as e:
        raise to_http_exception(e)
