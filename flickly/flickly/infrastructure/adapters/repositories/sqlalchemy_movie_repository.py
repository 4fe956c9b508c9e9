from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.movie import Movie as DomainMovie
from flickly.domain.ports.repositories.movie_repository import MovieRepository
from flickly.infrastructure.persistence.models import LikedMovie, MoviePerson, Review, WatchedMovie
from flickly.infrastructure.persistence.models import Movie as SQLMovie

SORT_ORDERS = {
    "title": (SQLMovie.title.asc(),),
    "rating_desc": (SQLMovie.rating.desc(), SQLMovie.title.asc()),
    "rating_asc": (SQLMovie.rating.asc(), SQLMovie.title.asc()),
    "year_desc": (SQLMovie.year.desc(), SQLMovie.title.asc()),
    "year_asc": (SQLMovie.year.asc(), SQLMovie.title.asc()),
}


class SQLAlchemyMovieRepository(MovieRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_movie: SQLMovie, people_ids: Optional[List[int]] = None) -> DomainMovie:
        return DomainMovie(
            id=sql_movie.id,
            title=sql_movie.title,
            genre=sql_movie.genre,
            year=sql_movie.year,
            description=sql_movie.description,
            cover_url=sql_movie.cover_url,
            rating=sql_movie.rating,
            people_ids=people_ids or [],
            created_at=sql_movie.created_at,
        )

    async def _people_map(self, movie_ids: List[int]) -> Dict[int, List[int]]:
        people: Dict[int, List[int]] = defaultdict(list)
        if not movie_ids:
            return people

        rows = await self.session.execute(
            select(MoviePerson.movie_id, MoviePerson.person_id)
            .where(MoviePerson.movie_id.in_(movie_ids))
            .order_by(MoviePerson.person_id)
        )
        for movie_id, person_id in rows.all():
            people[movie_id].append(person_id)
        return people

    async def _with_people(self, sql_movies: List[SQLMovie]) -> List[DomainMovie]:
        people = await self._people_map([movie.id for movie in sql_movies])
        return [self._to_domain(movie, people.get(movie.id)) for movie in sql_movies]

    async def _set_people(self, movie_id: int, people_ids: List[int]) -> None:
        await self.session.execute(delete(MoviePerson).where(MoviePerson.movie_id == movie_id))
        rows = [{"movie_id": movie_id, "person_id": person_id} for person_id in dict.fromkeys(people_ids)]
        if rows:
            await self.session.execute(insert(MoviePerson), rows)

    async def get_by_id(self, movie_id: int) -> Optional[DomainMovie]:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not sql_movie:
            return None
        people = await self._people_map([sql_movie.id])
        return self._to_domain(sql_movie, people.get(sql_movie.id))

    async def get_by_title(self, title: str) -> Optional[DomainMovie]:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.title == title))
        return self._to_domain(sql_movie) if sql_movie else None

    async def search(
        self,
        offset: int = 0,
        limit: int = 15,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        person_id: Optional[int] = None,
        sort: str = "title",
    ) -> Tuple[List[DomainMovie], int]:
        conditions = []
        if search:
            pattern = f"%{search}%"
            conditions.append(SQLMovie.title.ilike(pattern))
        if genre:
            conditions.append(SQLMovie.genre == genre)
        if person_id is not None:
            conditions.append(
                SQLMovie.id.in_(select(MoviePerson.movie_id).where(MoviePerson.person_id == person_id))
            )

        total = await self.session.scalar(select(func.count()).select_from(SQLMovie).where(*conditions))

        order_by = SORT_ORDERS.get(sort, SORT_ORDERS["title"])
        query = select(SQLMovie).where(*conditions).order_by(*order_by, SQLMovie.id).offset(offset).limit(limit)
        result = await self.session.scalars(query)
        movies = await self._with_people(list(result.all()))
        return movies, total or 0

    async def get_catalog(self) -> List[DomainMovie]:
        result = await self.session.scalars(select(SQLMovie).order_by(SQLMovie.id))
        return await self._with_people(list(result.all()))

    async def get_by_ids(self, movie_ids: List[int]) -> List[DomainMovie]:
        if not movie_ids:
            return []
        result = await self.session.scalars(select(SQLMovie).where(SQLMovie.id.in_(movie_ids)).order_by(SQLMovie.id))
        return await self._with_people(list(result.all()))

    async def list_genres(self) -> List[str]:
        result = await self.session.scalars(
            select(SQLMovie.genre).where(SQLMovie.genre.is_not(None)).distinct().order_by(SQLMovie.genre)
        )
        return list(result.all())

    async def create(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = SQLMovie(
            title=movie.title,
            genre=movie.genre,
            year=movie.year,
            description=movie.description,
            cover_url=movie.cover_url,
            rating=movie.rating or 0.0,
        )
        self.session.add(sql_movie)
        await self.session.flush()

        await self._set_people(sql_movie.id, movie.people_ids)
        await self.session.commit()
        await self.session.refresh(sql_movie)
        return await self.get_by_id(sql_movie.id)

    async def update(self, movie: DomainMovie) -> DomainMovie:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie.id))
        if not sql_movie:
            raise NotFoundError(f"Movie with id {movie.id} not found")

        sql_movie.title = movie.title
        sql_movie.genre = movie.genre
        sql_movie.year = movie.year
        sql_movie.description = movie.description
        sql_movie.cover_url = movie.cover_url

        await self._set_people(sql_movie.id, movie.people_ids)
        await self.session.commit()
        await self.session.refresh(sql_movie)
        return await self.get_by_id(sql_movie.id)

    async def update_rating(self, movie_id: int, rating: float) -> None:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not sql_movie:
            raise NotFoundError(f"Movie with id {movie_id} not found")

        sql_movie.rating = rating
        await self.session.commit()

    async def delete(self, movie_id: int) -> bool:
        sql_movie = await self.session.scalar(select(SQLMovie).where(SQLMovie.id == movie_id))
        if not sql_movie:
            return False

        for model in (MoviePerson, Review, LikedMovie, WatchedMovie):
            await self.session.execute(delete(model).where(model.movie_id == movie_id))
        await self.session.delete(sql_movie)
        await self.session.commit()
        return True
