from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from flickly.applications.interfaces.dtos.summary import PersonSummary

MovieSort = Literal["title", "rating_desc", "rating_asc", "year_desc", "year_asc"]


class MovieSchema(BaseModel):
    title: str = Field(min_length=1, max_length=255)
    genre: Optional[str] = None
    year: Optional[int] = None
    description: Optional[str] = None
    cover_url: Optional[str] = None
    people_ids: List[int] = []


class MoviePublic(BaseModel):
    id: int
    title: str
    genre: Optional[str] = None
    year: Optional[int] = None
    description: Optional[str] = None
    cover_url: Optional[str] = None
    rating: Optional[float] = None
    people_ids: List[int] = []
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class MovieDetail(MoviePublic):
    people: List[PersonSummary] = []


class MovieList(BaseModel):
    movies: list[MoviePublic]


class MovieFilter(BaseModel):
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=15, ge=1, le=100)
    search: Optional[str] = None
    genre: Optional[str] = None
    person_id: Optional[int] = None
    sort: MovieSort = "title"


class MoviePage(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    movies: list[MoviePublic]


class GenreList(BaseModel):
    genres: List[str]
