from abc import ABC, abstractmethod
from typing import List, Optional

from flickly.domain.models.friendship import FriendRequest, FriendRequestStatus


class FriendshipRepository(ABC):
    @abstractmethod
    async def create_request(self, request: FriendRequest) -> FriendRequest:
        pass

    @abstractmethod
    async def get_by_id(self, request_id: int) -> Optional[FriendRequest]:
        pass

    @abstractmethod
    async def get_between(self, user_id: int, other_user_id: int) -> List[FriendRequest]:
        pass

    @abstractmethod
    async def update_status(self, request_id: int, status: FriendRequestStatus) -> FriendRequest:
        pass

    @abstractmethod
    async def get_incoming(self, user_id: int) -> List[FriendRequest]:
        pass

    @abstractmethod
    async def get_friend_ids(self, user_id: int) -> List[int]:
        pass

    @abstractmethod
    async def delete_friendship(self, user_id: int, other_user_id: int) -> bool:
        pass
