from typing import List, Optional

from sqlalchemy import and_, delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.friendship import FriendRequest as DomainFriendRequest
from flickly.domain.models.friendship import FriendRequestStatus
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.infrastructure.persistence.models import FriendRequest as SQLFriendRequest


def _between(user_id: int, other_user_id: int):
    return or_(
        and_(SQLFriendRequest.requester_id == user_id, SQLFriendRequest.addressee_id == other_user_id),
        and_(SQLFriendRequest.requester_id == other_user_id, SQLFriendRequest.addressee_id == user_id),
    )


class SQLAlchemyFriendshipRepository(FriendshipRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_request: SQLFriendRequest) -> DomainFriendRequest:
        return DomainFriendRequest(
            id=sql_request.id,
            requester_id=sql_request.requester_id,
            addressee_id=sql_request.addressee_id,
            status=sql_request.status,
            created_at=sql_request.created_at,
        )

    async def create_request(self, request: DomainFriendRequest) -> DomainFriendRequest:
        sql_request = SQLFriendRequest(
            requester_id=request.requester_id,
            addressee_id=request.addressee_id,
            status=request.status.value,
        )
        self.session.add(sql_request)
        await self.session.commit()
        await self.session.refresh(sql_request)
        return self._to_domain(sql_request)

    async def get_by_id(self, request_id: int) -> Optional[DomainFriendRequest]:
        sql_request = await self.session.scalar(select(SQLFriendRequest).where(SQLFriendRequest.id == request_id))
        return self._to_domain(sql_request) if sql_request else None

    async def get_between(self, user_id: int, other_user_id: int) -> List[DomainFriendRequest]:
        result = await self.session.scalars(
            select(SQLFriendRequest).where(_between(user_id, other_user_id)).order_by(SQLFriendRequest.id)
        )
        return [self._to_domain(row) for row in result.all()]

    async def update_status(self, request_id: int, status: FriendRequestStatus) -> DomainFriendRequest:
        sql_request = await self.session.scalar(select(SQLFriendRequest).where(SQLFriendRequest.id == request_id))
        if not sql_request:
            raise NotFoundError(f"Friend request with id {request_id} not found")

        sql_request.status = status.value
        await self.session.commit()
        await self.session.refresh(sql_request)
        return self._to_domain(sql_request)

    async def get_incoming(self, user_id: int) -> List[DomainFriendRequest]:
        result = await self.session.scalars(
            select(SQLFriendRequest)
            .where(
                SQLFriendRequest.addressee_id == user_id,
                SQLFriendRequest.status == FriendRequestStatus.PENDING.value,
            )
            .order_by(SQLFriendRequest.created_at.desc(), SQLFriendRequest.id.desc())
        )
        return [self._to_domain(row) for row in result.all()]

    async def get_friend_ids(self, user_id: int) -> List[int]:
        result = await self.session.scalars(
            select(SQLFriendRequest).where(
                or_(SQLFriendRequest.requester_id == user_id, SQLFriendRequest.addressee_id == user_id),
                SQLFriendRequest.status == FriendRequestStatus.ACCEPTED.value,
            )
        )
        friend_ids = {
            row.addressee_id if row.requester_id == user_id else row.requester_id for row in result.all()
        }
        return sorted(friend_ids)

    async def delete_friendship(self, user_id: int, other_user_id: int) -> bool:
        result = await self.session.execute(
            delete(SQLFriendRequest).where(
                _between(user_id, other_user_id),
                SQLFriendRequest.status == FriendRequestStatus.ACCEPTED.value,
            )
        )
        await self.session.commit()
        return (result.rowcount or 0) > 0
