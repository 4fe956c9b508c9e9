from collections import defaultdict
from typing import Dict, List, Optional

from sqlalchemy import delete, insert, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.user import User as DomainUser
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.infrastructure.persistence.models import FriendRequest, LikedMovie, Review, WatchedMovie
from flickly.infrastructure.persistence.models import User as SQLUser


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        return DomainUser(
            id=sql_user.id,
            username=sql_user.username,
            email=sql_user.email,
            nickname=sql_user.nickname,
            password_hash=sql_user.password,
            role=sql_user.role,
            avatar_url=sql_user.avatar_url,
            created_at=sql_user.created_at,
        )

    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(
            username=user.username,
            email=user.email,
            nickname=user.nickname,
            password=user.password_hash,
            role=user.role.value,
            avatar_url=user.avatar_url,
        )
        self.session.add(sql_user)
        await self.session.commit()
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def get_by_id(self, user_id: int) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_ids(self, user_ids: List[int]) -> List[DomainUser]:
        if not user_ids:
            return []
        sql_users = await self.session.scalars(select(SQLUser).where(SQLUser.id.in_(user_ids)).order_by(SQLUser.id))
        return [self._to_domain(sql_user) for sql_user in sql_users.all()]

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.email == email))
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_username(self, username: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.username == username))
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_username_or_email(self, username: str, email: str) -> Optional[DomainUser]:
        sql_user = await self.session.scalar(
            select(SQLUser).where(or_(SQLUser.username == username, SQLUser.email == email))
        )
        return self._to_domain(sql_user) if sql_user else None

    async def get_all(self, offset: int = 0, limit: int = 100) -> List[DomainUser]:
        query = await self.session.scalars(select(SQLUser).order_by(SQLUser.id).offset(offset).limit(limit))
        return [self._to_domain(sql_user) for sql_user in query.all()]

    async def update(self, user: DomainUser) -> DomainUser:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user.id))
        if not sql_user:
            raise NotFoundError("User not found")

        sql_user.username = user.username
        sql_user.email = user.email
        sql_user.nickname = user.nickname
        sql_user.password = user.password_hash
        sql_user.role = user.role.value
        sql_user.avatar_url = user.avatar_url

        await self.session.commit()
        await self.session.refresh(sql_user)
        return self._to_domain(sql_user)

    async def delete(self, user_id: int) -> bool:
        sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        if not sql_user:
            return False

        for model in (Review, LikedMovie, WatchedMovie):
            await self.session.execute(delete(model).where(model.user_id == user_id))
        await self.session.execute(
            delete(FriendRequest).where(
                or_(FriendRequest.requester_id == user_id, FriendRequest.addressee_id == user_id)
            )
        )
        await self.session.delete(sql_user)
        await self.session.commit()
        return True

    async def get_liked_movie_ids(self, user_id: int) -> List[int]:
        liked = await self.get_liked_movie_map([user_id])
        return liked.get(user_id, [])

    async def get_liked_movie_map(self, user_ids: List[int]) -> Dict[int, List[int]]:
        liked: Dict[int, List[int]] = defaultdict(list)
        if not user_ids:
            return liked

        rows = await self.session.execute(
            select(LikedMovie.user_id, LikedMovie.movie_id)
            .where(LikedMovie.user_id.in_(user_ids))
            .order_by(LikedMovie.created_at, LikedMovie.movie_id)
        )
        for user_id, movie_id in rows.all():
            liked[user_id].append(movie_id)
        return liked

    async def _add_movie(self, model, user_id: int, movie_id: int) -> bool:
        existing = await self.session.scalar(
            select(model.movie_id).where(model.user_id == user_id, model.movie_id == movie_id)
        )
        if existing is not None:
            return False

        await self.session.execute(insert(model), [{"user_id": user_id, "movie_id": movie_id}])
        await self.session.commit()
        return True

    async def _remove_movie(self, model, user_id: int, movie_id: int) -> bool:
        result = await self.session.execute(
            delete(model).where(model.user_id == user_id, model.movie_id == movie_id)
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0

    async def add_liked_movie(self, user_id: int, movie_id: int) -> bool:
        return await self._add_movie(LikedMovie, user_id, movie_id)

    async def remove_liked_movie(self, user_id: int, movie_id: int) -> bool:
        return await self._remove_movie(LikedMovie, user_id, movie_id)

    async def get_watched_movie_ids(self, user_id: int) -> List[int]:
        result = await self.session.scalars(
            select(WatchedMovie.movie_id)
            .where(WatchedMovie.user_id == user_id)
            .order_by(WatchedMovie.created_at, WatchedMovie.movie_id)
        )
        return list(result.all())

    async def add_watched_movie(self, user_id: int, movie_id: int) -> bool:
        return await self._add_movie(WatchedMovie, user_id, movie_id)

    async def remove_watched_movie(self, user_id: int, movie_id: int) -> bool:
        return await self._remove_movie(WatchedMovie, user_id, movie_id)
