from flickly.applications.interfaces.dtos.user import UserPublic, UserUpdateSchema
from flickly.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.services.permissions import can_edit_user
from flickly.domain.services.validators import validate_email_length, validate_nickname


class UpdateUserUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, actor: User, user_id: int, user_data: UserUpdateSchema) -> UserPublic:
        existing_user = await self.user_repository.get_by_id(user_id)
        if not existing_user:
            raise NotFoundError("User not found")

        if not can_edit_user(actor, existing_user):
            raise PermissionDeniedError("Not enough permissions")

        updated_user = existing_user.model_copy()

        if user_data.nickname is not None:
            validate_nickname(user_data.nickname)
            updated_user.nickname = user_data.nickname.strip()

        if user_data.email is not None:
            email = user_data.email.strip().lower()
            validate_email_length(email)
            email_owner = await self.user_repository.get_by_email(email)
            if email_owner and email_owner.id != user_id:
                raise ConflictError("Email already exists")
            updated_user.email = email

        if user_data.avatar_url is not None:
            updated_user.avatar_url = user_data.avatar_url

        if user_data.role is not None and user_data.role != existing_user.role:
            if not actor.is_admin or actor.id == user_id:
                raise PermissionDeniedError("Only administrators can change roles")
            updated_user.role = user_data.role

        saved_user = await self.user_repository.update(updated_user)

        return UserPublic.model_validate(saved_user)
