from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordRequestForm

from flickly.applications.interfaces.dtos.token import Token
from flickly.applications.interfaces.dtos.user import RegisterSchema, UserPublic
from flickly.applications.use_cases.auth.login import LoginUseCase
from flickly.applications.use_cases.auth.register_user import RegisterUserUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.auth_service import AuthService
from flickly.domain.ports.services.login_rate_limiter import LoginRateLimiter
from flickly.infrastructure.config.dependencies import get_auth_service, get_login_rate_limiter, get_user_repository
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/auth", tags=["auth"])

OAuth2Form = Annotated[OAuth2PasswordRequestForm, Depends()]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
RateLimiterDep = Annotated[LoginRateLimiter, Depends(get_login_rate_limiter)]


@router.post("/register", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def register(user: RegisterSchema, user_repository: UserRepositoryDep, auth_service: AuthServiceDep):
    try:
        use_case = RegisterUserUseCase(user_repository, auth_service)
        return await use_case.execute(user)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/token", response_model=Token)
async def login_for_access_token(
    request: Request,
    form_data: OAuth2Form,
    user_repository: UserRepositoryDep,
    auth_service: AuthServiceDep,
    rate_limiter: RateLimiterDep,
):
    client_id = request.client.host if request.client else "unknown"
    try:
        use_case = LoginUseCase(user_repository, auth_service, rate_limiter)
        return await use_case.execute(form_data.username, form_data.password, client_id)
    except DomainError as e:
        raise to_http_exception(e)
