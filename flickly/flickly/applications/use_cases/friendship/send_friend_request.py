from flickly.applications.interfaces.dtos.friendship import FriendRequestPublic
from flickly.domain.exceptions import ConflictError, NotFoundError, ValidationError
from flickly.domain.models.friendship import FriendRequest, FriendRequestStatus
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class SendFriendRequestUseCase:
    def __init__(self, friendship_repository: FriendshipRepository, user_repository: UserRepository):
        self.friendship_repository = friendship_repository
        self.user_repository = user_repository

    async def execute(self, requester: User, addressee_id: int) -> FriendRequestPublic:
        if requester.id == addressee_id:
            raise ValidationError("You cannot send a friend request to yourself")

        addressee = await self.user_repository.get_by_id(addressee_id)
        if not addressee:
            raise NotFoundError("User not found")

        existing_requests = await self.friendship_repository.get_between(requester.id, addressee_id)
        statuses = {request.status for request in existing_requests}
        if FriendRequestStatus.ACCEPTED in statuses:
            raise ConflictError("You are already friends")
        if FriendRequestStatus.PENDING in statuses:
            raise ConflictError("A friend request is already pending")

        # a rejected request in the same direction is reopened
        for request in existing_requests:
            if request.requester_id == requester.id:
                reopened = await self.friendship_repository.update_status(request.id, FriendRequestStatus.PENDING)
                return FriendRequestPublic.model_validate(reopened)

        created_request = await self.friendship_repository.create_request(
            FriendRequest(requester_id=requester.id, addressee_id=addressee_id)
        )
        return FriendRequestPublic.model_validate(created_request)
