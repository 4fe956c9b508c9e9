from typing import List, Optional

from pydantic import BaseModel, Field


class Person(BaseModel):
    first_name: str
    last_name: str
    profession: str
    biography: Optional[str] = None
    photo_url: Optional[str] = None
    id: Optional[int] = None
    movie_ids: List[int] = Field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
