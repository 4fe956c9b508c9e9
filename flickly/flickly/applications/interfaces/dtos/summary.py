from typing import Optional

from pydantic import BaseModel, ConfigDict


class MovieSummary(BaseModel):
    id: int
    title: str
    genre: Optional[str] = None
    year: Optional[int] = None
    cover_url: Optional[str] = None
    rating: Optional[float] = None
    model_config = ConfigDict(from_attributes=True)


class PersonSummary(BaseModel):
    id: int
    first_name: str
    last_name: str
    profession: str
    photo_url: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)
