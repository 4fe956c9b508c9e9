from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.interfaces.dtos.review import ReviewList, ReviewPublic, ReviewSchema, ReviewUpdate
from flickly.applications.use_cases.review.create_review import CreateReviewUseCase
from flickly.applications.use_cases.review.delete_review import DeleteReviewUseCase
from flickly.applications.use_cases.review.get_review import GetReviewUseCase
from flickly.applications.use_cases.review.list_reviews import ListReviewsUseCase
from flickly.applications.use_cases.review.update_review import UpdateReviewUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.infrastructure.config.dependencies import get_current_user, get_movie_repository, get_review_repository
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/reviews", tags=["reviews"])

ReviewRepositoryDep = Annotated[ReviewRepository, Depends(get_review_repository)]
MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
CurrentUser = Annotated[User, Depends(get_current_user)]


@router.get("/", response_model=ReviewList)
async def read_reviews(review_repository: ReviewRepositoryDep):
    use_case = ListReviewsUseCase(review_repository)
    return await use_case.execute()


@router.get("/{review_id}", response_model=ReviewPublic)
async def read_review(review_id: int, review_repository: ReviewRepositoryDep):
    try:
        use_case = GetReviewUseCase(review_repository)
        return await use_case.execute(review_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/", status_code=HTTPStatus.CREATED, response_model=ReviewPublic)
async def create_review(
    review: ReviewSchema,
    current_user: CurrentUser,
    review_repository: ReviewRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = CreateReviewUseCase(review_repository, movie_repository)
        return await use_case.execute(current_user, review)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{review_id}", response_model=ReviewPublic)
async def update_review(
    review_id: int,
    review: ReviewUpdate,
    current_user: CurrentUser,
    review_repository: ReviewRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = UpdateReviewUseCase(review_repository, movie_repository)
        return await use_case.execute(current_user, review_id, review)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{review_id}", response_model=Message)
async def delete_review(
    review_id: int,
    current_user: CurrentUser,
    review_repository: ReviewRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = DeleteReviewUseCase(review_repository, movie_repository)
        return await use_case.execute(current_user, review_id)
    except DomainError as e:
        raise to_http_exception(e)
