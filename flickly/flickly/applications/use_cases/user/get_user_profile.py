from flickly.applications.interfaces.dtos.user import UserProfile, UserPublic
from flickly.domain.exceptions import NotFoundError
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.user_repository import UserRepository
from flickly.domain.services.validators import normalize_username


class GetUserProfileUseCase:
    def __init__(self, user_repository: UserRepository, friendship_repository: FriendshipRepository):
        self.user_repository = user_repository
        self.friendship_repository = friendship_repository

    async def execute(self, username: str) -> UserProfile:
        user = await self.user_repository.get_by_username(normalize_username(username))
        if not user:
            raise NotFoundError("User not found")

        friend_ids = await self.friendship_repository.get_friend_ids(user.id)
        friends = await self.user_repository.get_by_ids(friend_ids)
        liked_movie_ids = await self.user_repository.get_liked_movie_ids(user.id)

        return UserProfile(
            **UserPublic.model_validate(user).model_dump(),
            liked_movie_ids=liked_movie_ids,
            friends=[UserPublic.model_validate(friend) for friend in friends],
        )
