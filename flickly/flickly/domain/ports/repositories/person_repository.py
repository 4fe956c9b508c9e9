from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

from flickly.domain.models.person import Person


class PersonRepository(ABC):
    @abstractmethod
    async def get_by_id(self, person_id: int) -> Optional[Person]:
        pass

    @abstractmethod
    async def get_by_ids(self, person_ids: List[int]) -> List[Person]:
        pass

    @abstractmethod
    async def search(
        self,
        offset: int = 0,
        limit: int = 50,
        search: Optional[str] = None,
        profession: Optional[str] = None,
    ) -> Tuple[List[Person], int]:
        pass

    @abstractmethod
    async def list_professions(self) -> List[str]:
        pass

    @abstractmethod
    async def count_by_profession(self) -> Dict[str, int]:
        pass

    @abstractmethod
    async def create(self, person: Person) -> Person:
        pass

    @abstractmethod
    async def update(self, person: Person) -> Person:
        pass

    @abstractmethod
    async def delete(self, person_id: int) -> bool:
        pass
