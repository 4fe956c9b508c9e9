from flickly.applications.interfaces.dtos.user import RegisterSchema, UserPublic
from flickly.domain.exceptions import ConflictError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.ports.services.auth_service import AuthService
from flickly.domain.services.validators import (
    normalize_username,
    validate_email_length,
    validate_nickname,
    validate_password,
    validate_username,
)
from flickly.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)


class RegisterUserUseCase:
    def __init__(self, user_repository: UserRepository, auth_service: AuthService):
        self.user_repository = user_repository
        self.auth_service = auth_service

    async def execute(self, user_data: RegisterSchema) -> UserPublic:
        validate_username(user_data.username)
        validate_nickname(user_data.nickname)
        validate_password(user_data.password)

        username = normalize_username(user_data.username)
        email = user_data.email.strip().lower()
        validate_email_length(email)

        existing_user = await self.user_repository.get_by_username_or_email(username, email)
        if existing_user:
            if existing_user.username == username:
                raise ConflictError("Username already exists")
            raise ConflictError("Email already exists")

        logger.info(f"Registering user: {username}")

        user = User(
            username=username,
            email=email,
            nickname=user_data.nickname.strip(),
            password_hash=self.auth_service.hash_password(user_data.password),
        )
        created_user = await self.user_repository.create(user)

        if created_user.id is None:
            raise RuntimeError("User creation failed - no ID assigned")

        logger.info(f"User registered successfully: {created_user.username}")

        return UserPublic.model_validate(created_user)
