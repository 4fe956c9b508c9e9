from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from flickly.applications.interfaces.dtos.friendship import FriendList, FriendRequestList, FriendRequestPublic
from flickly.applications.interfaces.dtos.message import Message
from flickly.applications.use_cases.friendship.list_friends import ListFriendsUseCase
from flickly.applications.use_cases.friendship.list_incoming_requests import ListIncomingRequestsUseCase
from flickly.applications.use_cases.friendship.remove_friend import RemoveFriendUseCase
from flickly.applications.use_cases.friendship.respond_friend_request import RespondFriendRequestUseCase
from flickly.applications.use_cases.friendship.send_friend_request import SendFriendRequestUseCase
from flickly.domain.exceptions import DomainError
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.infrastructure.config.dependencies import get_current_user, get_friendship_repository, get_user_repository
from flickly.presentation.errors import to_http_exception

router = APIRouter(prefix="/friends", tags=["friends"])

FriendshipRepositoryDep = Annotated[FriendshipRepository, Depends(get_friendship_repository)]
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
CurrentUser = Annotated[User, Depends(get_current_user)]


@router.get("/", response_model=FriendList)
async def read_friends(
    current_user: CurrentUser, friendship_repository: FriendshipRepositoryDep, user_repository: UserRepositoryDep
):
    use_case = ListFriendsUseCase(friendship_repository, user_repository)
    return await use_case.execute(current_user.id)


@router.delete("/{user_id}", response_model=Message)
async def remove_friend(user_id: int, current_user: CurrentUser, friendship_repository: FriendshipRepositoryDep):
    try:
        use_case = RemoveFriendUseCase(friendship_repository)
        return await use_case.execute(current_user.id, user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/requests/incoming", response_model=FriendRequestList)
async def read_incoming_requests(current_user: CurrentUser, friendship_repository: FriendshipRepositoryDep):
    use_case = ListIncomingRequestsUseCase(friendship_repository)
    return await use_case.execute(current_user.id)


@router.post("/requests/{user_id}", status_code=HTTPStatus.CREATED, response_model=FriendRequestPublic)
async def send_friend_request(
    user_id: int,
    current_user: CurrentUser,
    friendship_repository: FriendshipRepositoryDep,
    user_repository: UserRepositoryDep,
):
    try:
        use_case = SendFriendRequestUseCase(friendship_repository, user_repository)
        return await use_case.execute(current_user, user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/requests/{request_id}/accept", response_model=FriendRequestPublic)
async def accept_friend_request(
    request_id: int, current_user: CurrentUser, friendship_repository: FriendshipRepositoryDep
):
    try:
        use_case = RespondFriendRequestUseCase(friendship_repository)
        return await use_case.execute(current_user, request_id, accept=True)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/requests/{request_id}/reject", response_model=FriendRequestPublic)
async def reject_friend_request(
    request_id: int, current_user: CurrentUser, friendship_repository: FriendshipRepositoryDep
):
    try:
        use_case = RespondFriendRequestUseCase(friendship_repository)
        return await use_case.execute(current_user, request_id, accept=False)
    except DomainError as e:
        raise to_http_exception(e)
