from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ReviewSchema(BaseModel):
    movie_id: int
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    rating: int


class ReviewUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    body: Optional[str] = Field(default=None, min_length=1)
    rating: Optional[int] = None


class ReviewPublic(BaseModel):
    id: int
    user_id: int
    movie_id: int
    title: str
    body: str
    rating: int
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class ReviewList(BaseModel):
    reviews: list[ReviewPublic]
