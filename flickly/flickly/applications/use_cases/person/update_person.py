from flickly.applications.interfaces.dtos.person import PersonPublic, PersonSchema
from flickly.applications.services.catalog_links import ensure_movies_exist
from flickly.domain.exceptions import NotFoundError, PermissionDeniedError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.domain.services.permissions import can_manage_catalog


class UpdatePersonUseCase:
    def __init__(self, person_repository: PersonRepository, movie_repository: MovieRepository):
        self.person_repository = person_repository
        self.movie_repository = movie_repository

    async def execute(self, actor: User, person_id: int, person_data: PersonSchema) -> PersonPublic:
        if not can_manage_catalog(actor):
            raise PermissionDeniedError("Only administrators can edit people")

        existing_person = await self.person_repository.get_by_id(person_id)
        if not existing_person:
            raise NotFoundError(f"Person with id {person_id} not found")

        await ensure_movies_exist(self.movie_repository, person_data.movie_ids)

        updated_person = existing_person.model_copy(
            update={
                "first_name": person_data.first_name.strip(),
                "last_name": person_data.last_name.strip(),
                "profession": person_data.profession.strip().lower(),
                "biography": person_data.biography,
                "photo_url": person_data.photo_url,
                "movie_ids": person_data.movie_ids,
            }
        )

        result = await self.person_repository.update(updated_person)

        return PersonPublic.model_validate(result)
