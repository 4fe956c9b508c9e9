from abc import ABC, abstractmethod
from typing import List, Optional

from flickly.domain.models.review import Review


class ReviewRepository(ABC):
    @abstractmethod
    async def create(self, review: Review) -> Review:
        pass

    @abstractmethod
    async def get_by_id(self, review_id: int) -> Optional[Review]:
        pass

    @abstractmethod
    async def get_all(self) -> List[Review]:
        pass

    @abstractmethod
    async def get_by_movie_id(self, movie_id: int) -> List[Review]:
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Review]:
        pass

    @abstractmethod
    async def get_by_user_ids(self, user_ids: List[int]) -> List[Review]:
        pass

    @abstractmethod
    async def update(self, review: Review) -> Review:
        pass

    @abstractmethod
    async def delete(self, review_id: int) -> bool:
        pass

    @abstractmethod
    async def average_rating(self, movie_id: int) -> Optional[float]:
        pass
