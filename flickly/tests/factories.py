from datetime import datetime
from typing import List, Optional

from flickly.domain.models.friendship import FriendRequest, FriendRequestStatus
from flickly.domain.models.movie import Movie
from flickly.domain.models.person import Person
from flickly.domain.models.review import Review
from flickly.domain.models.user import Role, User


class UserFactory:
    """Factory for creating test users"""

    def create_domain_user(
        self,
        *,
        id: Optional[int] = 1,
        username: str = "@testuser",
        email: str = "test@example.com",
        nickname: str = "Tester",
        role: Role = Role.USER,
        liked_movie_ids: Optional[List[int]] = None,
        friend_ids: Optional[List[int]] = None,
    ) -> User:
        return User(
            id=id,
            username=username,
            email=email,
            nickname=nickname,
            password_hash="hashed_password",
            role=role,
            created_at=datetime(2024, 1, 1),
            liked_movie_ids=liked_movie_ids or [],
            friend_ids=friend_ids or [],
        )

    def create_register_data(
        self, *, username: str = "testuser", email: str = "test@example.com", password: str = "password123"
    ) -> dict:
        """Create registration payload for API and use case tests"""
        return {"username": username, "email": email, "nickname": "Tester", "password": password}


class MovieFactory:
    def create_domain_movie(
        self,
        *,
        id: Optional[int] = 1,
        title: Optional[str] = None,
        genre: Optional[str] = "Drama",
        rating: Optional[float] = 0.0,
        people_ids: Optional[List[int]] = None,
    ) -> Movie:
        return Movie(
            id=id,
            title=title or f"Movie {id}",
            genre=genre,
            year=2000,
            rating=rating,
            people_ids=people_ids or [],
        )


class PersonFactory:
    def create_domain_person(
        self, *, id: Optional[int] = 1, profession: str = "actor", movie_ids: Optional[List[int]] = None
    ) -> Person:
        return Person(
            id=id, first_name="Jane", last_name=f"Doe{id}", profession=profession, movie_ids=movie_ids or []
        )


class ReviewFactory:
    def create_domain_review(self, *, id: Optional[int] = 1, user_id: int = 1, movie_id: int = 1, rating: int = 8) -> Review:
        return Review(
            id=id,
            user_id=user_id,
            movie_id=movie_id,
            title="Great",
            body="Loved it",
            rating=rating,
            created_at=datetime(2024, 1, 1),
        )


class FriendRequestFactory:
    def create_domain_request(
        self,
        *,
        id: Optional[int] = 1,
        requester_id: int = 1,
        addressee_id: int = 2,
        status: FriendRequestStatus = FriendRequestStatus.PENDING,
    ) -> FriendRequest:
        return FriendRequest(
            id=id, requester_id=requester_id, addressee_id=addressee_id, status=status, created_at=datetime(2024, 1, 1)
        )


# Global factory instances
user_factory = UserFactory()
movie_factory = MovieFactory()
person_factory = PersonFactory()
review_factory = ReviewFactory()
friend_request_factory = FriendRequestFactory()
