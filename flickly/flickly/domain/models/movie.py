from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Movie(BaseModel):
    title: str
    genre: Optional[str] = None
    year: Optional[int] = None
    description: Optional[str] = None
    cover_url: Optional[str] = None
    rating: Optional[float] = None
    id: Optional[int] = None
    people_ids: List[int] = Field(default_factory=list)
    created_at: Optional[datetime] = None
