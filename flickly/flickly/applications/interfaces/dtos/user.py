from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from flickly.domain.models.user import Role


class RegisterSchema(BaseModel):
    username: str
    email: EmailStr
    nickname: str
    password: str


class UserUpdateSchema(BaseModel):
    nickname: Optional[str] = None
    email: Optional[EmailStr] = None
    avatar_url: Optional[str] = None
    role: Optional[Role] = None


class UserPublic(BaseModel):
    id: int
    username: str
    nickname: str
    role: Role
    avatar_url: Optional[str] = None
    created_at: Optional[datetime] = None
    model_config = ConfigDict(from_attributes=True)


class UserMe(UserPublic):
    email: str
    liked_movie_ids: List[int] = []
    friend_ids: List[int] = []


class UserProfile(UserPublic):
    liked_movie_ids: List[int] = []
    friends: List[UserPublic] = []


class UserList(BaseModel):
    users: list[UserPublic]
