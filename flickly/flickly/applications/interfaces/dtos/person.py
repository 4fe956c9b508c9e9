from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from flickly.applications.interfaces.dtos.summary import MovieSummary


class PersonSchema(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    profession: str = Field(min_length=1, max_length=50)
    biography: Optional[str] = None
    photo_url: Optional[str] = None
    movie_ids: List[int] = []


class PersonPublic(BaseModel):
    id: int
    first_name: str
    last_name: str
    profession: str
    biography: Optional[str] = None
    photo_url: Optional[str] = None
    movie_ids: List[int] = []
    model_config = ConfigDict(from_attributes=True)


class PersonDetail(PersonPublic):
    movies: List[MovieSummary] = []


class PersonFilter(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=50, ge=1, le=200)
    search: Optional[str] = None
    profession: Optional[str] = None


class PersonPage(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    people: list[PersonPublic]


class PeopleStats(BaseModel):
    total: int
    actors: int
    directors: int
    producers: int


class ProfessionList(BaseModel):
    professions: List[str]
