from flickly.applications.interfaces.dtos.person import PersonFilter, PersonPage, PersonPublic
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.services.ranker import total_pages


class GetPeopleUseCase:
    def __init__(self, person_repository: PersonRepository):
        self.person_repository = person_repository

    async def execute(self, person_filter: PersonFilter) -> PersonPage:
        people, total = await self.person_repository.search(
            offset=(person_filter.page - 1) * person_filter.limit,
            limit=person_filter.limit,
            search=person_filter.search.strip() if person_filter.search else None,
            profession=person_filter.profession,
        )

        return PersonPage(
            page=person_filter.page,
            limit=person_filter.limit,
            total=total,
            total_pages=total_pages(total, person_filter.limit),
            people=[PersonPublic.model_validate(person) for person in people],
        )
