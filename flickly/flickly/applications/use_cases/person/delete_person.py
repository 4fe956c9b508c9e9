from flickly.applications.interfaces.dtos.message import Message
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.services.permissions import can_manage_catalog


class DeletePersonUseCase:
    def __init__(self, person_repository: PersonRepository):
        self.person_repository = person_repository

    async def execute(self, actor: User, person_id: int) -> Message:
        if not can_manage_catalog(actor):
            raise PermissionDeniedError("Only administrators can delete people")

        existing_person = await self.person_repository.get_by_id(person_id)
        if not existing_person:
            raise NotFoundError(f"Person with id {person_id} not found")

        success = await self.person_repository.delete(person_id)
        if not success:
            raise RuntimeError(f"Failed to delete person with id {person_id}")

        return Message(message=f"{existing_person.full_name} deleted successfully")
