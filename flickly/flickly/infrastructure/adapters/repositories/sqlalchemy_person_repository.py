from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.person import Person as DomainPerson
from flickly.domain.ports.repositories.person_repository import PersonRepository
from flickly.infrastructure.persistence.models import MoviePerson
from flickly.infrastructure.persistence.models import Person as SQLPerson


class SQLAlchemyPersonRepository(PersonRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_person: SQLPerson, movie_ids: Optional[List[int]] = None) -> DomainPerson:
        return DomainPerson(
            id=sql_person.id,
            first_name=sql_person.first_name,
            last_name=sql_person.last_name,
            profession=sql_person.profession,
            biography=sql_person.biography,
            photo_url=sql_person.photo_url,
            movie_ids=movie_ids or [],
        )

    async def _movies_map(self, person_ids: List[int]) -> Dict[int, List[int]]:
        movies: Dict[int, List[int]] = defaultdict(list)
        if not person_ids:
            return movies

        rows = await self.session.execute(
            select(MoviePerson.person_id, MoviePerson.movie_id)
            .where(MoviePerson.person_id.in_(person_ids))
            .order_by(MoviePerson.movie_id)
        )
        for person_id, movie_id in rows.all():
            movies[person_id].append(movie_id)
        return movies

    async def _with_movies(self, sql_people: List[SQLPerson]) -> List[DomainPerson]:
        movies = await self._movies_map([person.id for person in sql_people])
        return [self._to_domain(person, movies.get(person.id)) for person in sql_people]

    async def _set_movies(self, person_id: int, movie_ids: List[int]) -> None:
        await self.session.execute(delete(MoviePerson).where(MoviePerson.person_id == person_id))
        rows = [{"movie_id": movie_id, "person_id": person_id} for movie_id in dict.fromkeys(movie_ids)]
        if rows:
            await self.session.execute(insert(MoviePerson), rows)

    async def get_by_id(self, person_id: int) -> Optional[DomainPerson]:
        sql_person = await self.session.scalar(select(SQLPerson).where(SQLPerson.id == person_id))
        if not sql_person:
            return None
        movies = await self._movies_map([sql_person.id])
        return self._to_domain(sql_person, movies.get(sql_person.id))

    async def get_by_ids(self, person_ids: List[int]) -> List[DomainPerson]:
        if not person_ids:
            return []
        result = await self.session.scalars(
            select(SQLPerson)
            .where(SQLPerson.id.in_(person_ids))
            .order_by(SQLPerson.last_name, SQLPerson.first_name, SQLPerson.id)
        )
        return await self._with_movies(list(result.all()))

    async def search(
        self,
        offset: int = 0,
        limit: int = 50,
        search: Optional[str] = None,
        profession: Optional[str] = None,
    ) -> Tuple[List[DomainPerson], int]:
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(
                or_(
                    SQLPerson.first_name.ilike(pattern),
                    SQLPerson.last_name.ilike(pattern),
                    SQLPerson.biography.ilike(pattern),
                )
            )
        if profession:
            conditions.append(SQLPerson.profession == profession)

        total = await self.session.scalar(select(func.count()).select_from(SQLPerson).where(*conditions))

        query = (
            select(SQLPerson)
            .where(*conditions)
            .order_by(SQLPerson.last_name, SQLPerson.first_name, SQLPerson.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.scalars(query)
        people = await self._with_movies(list(result.all()))
        return people, total or 0

    async def list_professions(self) -> List[str]:
        result = await self.session.scalars(select(SQLPerson.profession).distinct().order_by(SQLPerson.profession))
        return list(result.all())

    async def count_by_profession(self) -> Dict[str, int]:
        rows = await self.session.execute(
            select(SQLPerson.profession, func.count()).group_by(SQLPerson.profession)
        )
        return {profession: count for profession, count in rows.all()}

    async def create(self, person: DomainPerson) -> DomainPerson:
        sql_person = SQLPerson(
            first_name=person.first_name,
            last_name=person.last_name,
            profession=person.profession,
            biography=person.biography,
            photo_url=person.photo_url,
        )
        self.session.add(sql_person)
        await self.session.flush()

        await self._set_movies(sql_person.id, person.movie_ids)
        await self.session.commit()
        await self.session.refresh(sql_person)
        return await self.get_by_id(sql_person.id)

    async def update(self, person: DomainPerson) -> DomainPerson:
        sql_person = await self.session.scalar(select(SQLPerson).where(SQLPerson.id == person.id))
        if not sql_person:
            raise NotFoundError(f"Person with id {person.id} not found")

        sql_person.first_name = person.first_name
        sql_person.last_name = person.last_name
        sql_person.profession = person.profession
        sql_person.biography = person.biography
        sql_person.photo_url = person.photo_url

        await self._set_movies(sql_person.id, person.movie_ids)
        await self.session.commit()
        await self.session.refresh(sql_person)
        return await self.get_by_id(sql_person.id)

    async def delete(self, person_id: int) -> bool:
        sql_person = await self.session.scalar(select(SQLPerson).where(SQLPerson.id == person_id))
        if not sql_person:
            return False

        await self.session.execute(delete(MoviePerson).where(MoviePerson.person_id == person_id))
        await self.session.delete(sql_person)
        await self.session.commit()
        return True
