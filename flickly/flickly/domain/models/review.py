from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class Review(BaseModel):
    user_id: int
    movie_id: int
    title: str
    body: str
    rating: int
    id: Optional[int] = None
    created_at: Optional[datetime] = None
