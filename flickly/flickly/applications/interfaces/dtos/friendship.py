from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

from flickly.applications.interfaces.dtos.user import UserPublic
from flickly.domain.models.friendship import FriendRequestStatus


class FriendRequestPublic(BaseModel):
    id: int
    requester_id: int
    addressee_id: int
    status: FriendRequestStatus
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class FriendRequestList(BaseModel):
    requests: list[FriendRequestPublic]


class FriendList(BaseModel):
    friends: list[UserPublic]
