from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from flickly.domain.models.movie import Movie


class MovieRepository(ABC):
    @abstractmethod
    async def get_by_id(self, movie_id: int) -> Optional[Movie]:
        pass

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[Movie]:
        pass

    @abstractmethod
    async def search(
        self,
        offset: int = 0,
        limit: int = 15,
        search: Optional[str] = None,
        genre: Optional[str] = None,
        person_id: Optional[int] = None,
        sort: str = "title",
    ) -> Tuple[List[Movie], int]:
        pass

    @abstractmethod
    async def get_catalog(self) -> List[Movie]:
        pass

    @abstractmethod
    async def get_by_ids(self, movie_ids: List[int]) -> List[Movie]:
        pass

    @abstractmethod
    async def list_genres(self) -> List[str]:
        pass

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        pass

    @abstractmethod
    async def update_rating(self, movie_id: int, rating: float) -> None:
        pass

    @abstractmethod
    async def delete(self, movie_id: int) -> bool:
        pass
