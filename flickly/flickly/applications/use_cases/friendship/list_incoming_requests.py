from flickly.applications.interfaces.dtos.friendship import FriendRequestList, FriendRequestPublic
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository


class ListIncomingRequestsUseCase:
    def __init__(self, friendship_repository: FriendshipRepository):
        self.friendship_repository = friendship_repository

    async def execute(self, user_id: int) -> FriendRequestList:
        requests = await self.friendship_repository.get_incoming(user_id)
        return FriendRequestList(requests=[FriendRequestPublic.model_validate(request) for request in requests])
