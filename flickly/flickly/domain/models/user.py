from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Role(str, Enum):
    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class User(BaseModel):
    username: str
    email: str
    nickname: str
    password_hash: Optional[str] = None
    role: Role = Role.USER
    avatar_url: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    liked_movie_ids: List[int] = Field(default_factory=list)
    friend_ids: List[int] = Field(default_factory=list)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_moderator(self) -> bool:
        return self.role == Role.MODERATOR
