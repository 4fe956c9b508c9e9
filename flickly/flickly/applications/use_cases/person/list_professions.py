from flickly.applications.interfaces.dtos.person import ProfessionList
from flickly.domain.ports.repositories.person_repository import PersonRepository


class ListProfessionsUseCase:
    def __init__(self, person_repository: PersonRepository):
        self.person_repository = person_repository

    async def execute(self) -> ProfessionList:
        return ProfessionList(professions=await self.person_repository.list_professions())
