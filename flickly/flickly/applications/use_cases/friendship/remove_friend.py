from flickly.applications.interfaces.dtos.message import Message
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository


class RemoveFriendUseCase:
    def __init__(self, friendship_repository: FriendshipRepository):
        self.friendship_repository = friendship_repository

    async def execute(self, user_id: int, friend_id: int) -> Message:
        removed = await self.friendship_repository.delete_friendship(user_id, friend_id)
        if not removed:
            raise NotFoundError("You are not friends with this user")

        return Message(message="Friend removed")
