from flickly.applications.interfaces.dtos.user import UserMe
from flickly.domain.models.user import User
from flickly.domain.ports.repositories.friendship_repository import FriendshipRepository
from flickly.domain.ports.repositories.user_repository import UserRepository


class GetCurrentUserUseCase:
    def __init__(self, user_repository: UserRepository, friendship_repository: FriendshipRepository):
        self.user_repository = user_repository
        self.friendship_repository = friendship_repository

    async def execute(self, user: User) -> UserMe:
        liked_movie_ids = await self.user_repository.get_liked_movie_ids(user.id)
        friend_ids = await self.friendship_repository.get_friend_ids(user.id)

        return UserMe(
            **user.model_dump(exclude={"liked_movie_ids", "friend_ids", "password_hash"}),
            liked_movie_ids=liked_movie_ids,
            friend_ids=friend_ids,
        )
