from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from flickly.domain.models.user import User


class UserRepository(ABC):
    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_ids(self, user_ids: List[int]) -> List[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_username_or_email(self, username: str, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def get_all(self, offset: int = 0, limit: int = 100) -> List[User]:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        pass

    @abstractmethod
    async def get_liked_movie_ids(self, user_id: int) -> List[int]:
        pass

    @abstractmethod
    async def get_liked_movie_map(self, user_ids: List[int]) -> Dict[int, List[int]]:
        pass

    @abstractmethod
    async def add_liked_movie(self, user_id: int, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def remove_liked_movie(self, user_id: int, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def get_watched_movie_ids(self, user_id: int) -> List[int]:
        pass

    @abstractmethod
    async def add_watched_movie(self, user_id: int, movie_id: int) -> bool:
        pass

    @abstractmethod
    async def remove_watched_movie(self, user_id: int, movie_id: int) -> bool:
        pass
