from flickly.applications.interfaces.dtos.friendship import FriendRequestPublic
from flickly.domain.exceptions import ConflictError, NotFoundError, PermissionDeniedError
from flickly.domain.models.friendship import FriendRequestStatus
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository


class RespondFriendRequestUseCase:
    def __init__(self, friendship_repository: FriendshipRepository):
        self.friendship_repository = friendship_repository

    async def execute(self, addressee: User, request_id: int, accept: bool) -> FriendRequestPublic:
        request = await self.friendship_repository.get_by_id(request_id)
        if not request:
            raise NotFoundError(f"Friend request with id {request_id} not found")

        if request.addressee_id != addressee.id:
            raise PermissionDeniedError("Only the recipient can answer a friend request")

        if request.status != FriendRequestStatus.PENDING:
            raise ConflictError("Friend request is not pending")

        status = FriendRequestStatus.ACCEPTED if accept else FriendRequestStatus.REJECTED
        updated_request = await self.friendship_repository.update_status(request_id, status)

        return FriendRequestPublic.model_validate(updated_request)
