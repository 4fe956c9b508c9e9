from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class FriendRequestStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class FriendRequest(BaseModel):
    requester_id: int
    addressee_id: int
    status: FriendRequestStatus = FriendRequestStatus.PENDING
    id: Optional[int] = None
    created_at: Optional[datetime] = None
