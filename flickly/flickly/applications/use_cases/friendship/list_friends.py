from flickly.applications.interfaces.dtos.friendship import FriendList
from flickly.applications.interfaces.dtos.user import UserPublic
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class ListFriendsUseCase:
    def __init__(self, friendship_repository: FriendshipRepository, user_repository: UserRepository):
        self.friendship_repository = friendship_repository
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> FriendList:
        friend_ids = await self.friendship_repository.get_friend_ids(user_id)
        friends = await self.user_repository.get_by_ids(friend_ids)
        return FriendList(friends=[UserPublic.model_validate(friend) for friend in friends])
