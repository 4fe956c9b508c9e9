from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.interfaces.dtos.person import (
    PeopleStats,
    PersonDetail,
    PersonFilter,
    PersonPage,
    PersonPublic,
    PersonSchema,
    ProfessionList,
)
from flickly.applications.use_cases.person.create_person import CreatePersonUseCase
from flickly.applications.use_cases.person.delete_person import DeletePersonUseCase
from flickly.applications.use_cases.person.get_people import GetPeopleUseCase
from flickly.applications.use_cases.person.get_people_stats import GetPeopleStatsUseCase
from flickly.applications.use_cases.person.get_person import GetPersonUseCase
from flickly.applications.use_cases.person.list_professions import ListProfessionsUseCase
from flickly.applications.use_cases.person.update_person import UpdatePersonUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.infrastructure.config.dependencies import get_current_user, get_movie_repository, get_person_repository
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/people", tags=["people"])

PersonRepositoryDep = Annotated[PersonRepository, Depends(get_person_repository)]
MovieRepositoryDep = Annotated[MovieRepository, Depends(get_movie_repository)]
CurrentUser = Annotated[User, Depends(get_current_user)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=PersonPublic)
async def create_person(
    person: PersonSchema,
    current_user: CurrentUser,
    person_repository: PersonRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = CreatePersonUseCase(person_repository, movie_repository)
        return await use_case.execute(current_user, person)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/", response_model=PersonPage)
async def read_people(filter_people: Annotated[PersonFilter, Query()], person_repository: PersonRepositoryDep):
    use_case = GetPeopleUseCase(person_repository)
    return await use_case.execute(filter_people)


@router.get("/stats", response_model=PeopleStats)
async def read_people_stats(person_repository: PersonRepositoryDep):
    use_case = GetPeopleStatsUseCase(person_repository)
    return await use_case.execute()


@router.get("/professions", response_model=ProfessionList)
async def read_professions(person_repository: PersonRepositoryDep):
    use_case = ListProfessionsUseCase(person_repository)
    return await use_case.execute()


@router.get("/{person_id}", response_model=PersonDetail)
async def read_person(person_id: int, person_repository: PersonRepositoryDep, movie_repository: MovieRepositoryDep):
    try:
        use_case = GetPersonUseCase(person_repository, movie_repository)
        return await use_case.execute(person_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{person_id}", response_model=PersonPublic)
async def update_person(
    person_id: int,
    person: PersonSchema,
    current_user: CurrentUser,
    person_repository: PersonRepositoryDep,
    movie_repository: MovieRepositoryDep,
):
    try:
        use_case = UpdatePersonUseCase(person_repository, movie_repository)
        return await use_case.execute(current_user, person_id, person)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{person_id}", response_model=Message)
async def delete_person(person_id: int, current_user: CurrentUser, person_repository: PersonRepositoryDep):
    try:
        use_case = DeletePersonUseCase(person_repository)
        return await use_case.execute(current_user, person_id)
    except DomainError as e:
        raise to_http_exception(e)
