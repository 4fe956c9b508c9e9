from http import HTTPStatus

from fastapi import HTTPException

from flickly.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DataUnavailableError,
    DomainError,
    InvalidPageError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitExceededError,
    ValidationError,
)

STATUS_BY_ERROR = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    InvalidPageError: HTTPStatus.BAD_REQUEST,
    AuthenticationError: HTTPStatus.UNAUTHORIZED,
    PermissionDeniedError: HTTPStatus.FORBIDDEN,
    NotFoundError: HTTPStatus.NOT_FOUND,
    ConflictError: HTTPStatus.CONFLICT,
    RateLimitExceededError: HTTPStatus.TOO_MANY_REQUESTS,
    DataUnavailableError: HTTPStatus.SERVICE_UNAVAILABLE,
}


def to_http_exception(error: DomainError) -> HTTPException:
    status_code = STATUS_BY_ERROR.get(type(error), HTTPStatus.BAD_REQUEST)
    headers = {"WWW-Authenticate": "Bearer"} if status_code == HTTPStatus.UNAUTHORIZED else None
    return HTTPException(status_code=status_code, detail=str(error), headers=headers)
