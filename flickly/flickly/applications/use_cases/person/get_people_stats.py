from flickly.applications.interfaces.dtos.person import PeopleStats
from flickly.domain.ports.repositories.person_repository import PersonRepository


class GetPeopleStatsUseCase:
    def __init__(self, person_repository: PersonRepository):
        self.person_repository = person_repository

    async def execute(self) -> PeopleStats:
        counts = await self.person_repository.count_by_profession()

        return PeopleStats(
            total=sum(counts.values()),
            actors=counts.get("actor", 0),
            directors=counts.get("director", 0),
            producers=counts.get("producer", 0),
        )
