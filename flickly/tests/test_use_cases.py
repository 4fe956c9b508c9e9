from unittest.mock import call

import pytest

from flickly.applications.interfaces.dtos.movie import MovieFilter, MovieSchema
from flickly.applications.interfaces.dtos.person import PersonSchema
from flickly.applications.interfaces.dtos.review import ReviewSchema, ReviewUpdate
from flickly.applications.interfaces.dtos.user import RegisterSchema, UserPublic, UserUpdateSchema
from flickly.applications.use_cases.auth.login import LoginUseCase
from flickly.applications.use_cases.auth.register_user import RegisterUserUseCase
from flickly.applications.use_cases.friendship.respond_friend_request import RespondFriendRequestUseCase
from flickly.applications.use_cases.friendship.send_friend_request import SendFriendRequestUseCase
from flickly.applications.use_cases.movie.create_movie import CreateMovieUseCase
from flickly.applications.use_cases.movie.get_movies import GetMoviesUseCase
from flickly.applications.use_cases.movie.update_movie import UpdateMovieUseCase
from flickly.applications.use_cases.person.create_person import CreatePersonUseCase
from flickly.applications.use_cases.person.get_people_stats import GetPeopleStatsUseCase
from flickly.applications.use_cases.person.update_person import UpdatePersonUseCase
from flickly.applications.use_cases.review.create_review import CreateReviewUseCase
from flickly.applications.use_cases.review.delete_review import DeleteReviewUseCase
from flickly.applications.use_cases.review.update_review import UpdateReviewUseCase
from flickly.applications.use_cases.user.delete_user import DeleteUserUseCase
from flickly.applications.use_cases.user.update_user import UpdateUserUseCase
from flickly.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitExceededError,
    ValidationError,
)
from flickly.domain.models.friendship import FriendRequestStatus
from flickly.domain.models.user import Role
from flickly.infrastructure.adapters.services.in_memory_login_rate_limiter import InMemoryLoginRateLimiter

from .factories import friend_request_factory, movie_factory, person_factory, review_factory, user_factory


class TestRegisterUserUseCase:
    @pytest.fixture
    def use_case(self, mock_user_repository, mock_auth_service):
        mock_auth_service.hash_password.return_value = "hashed"
        return RegisterUserUseCase(mock_user_repository, mock_auth_service)

    @pytest.mark.asyncio
    async def test_register_normalizes_input(self, use_case, mock_user_repository):
        mock_user_repository.get_by_username_or_email.return_value = None
        mock_user_repository.create.return_value = user_factory.create_domain_user(id=1, username="@alice")

        result = await use_case.execute(
            RegisterSchema(**user_factory.create_register_data(username=" alice ", email="Alice@Example.com"))
        )

        assert isinstance(result, UserPublic)
        created = mock_user_repository.create.call_args.args[0]
        assert created.username == "@alice"
        assert created.email == "alice@example.com"
        assert created.password_hash == "hashed"
        mock_user_repository.get_by_username_or_email.assert_called_once_with("@alice", "alice@example.com")

    @pytest.mark.asyncio
    async def test_register_duplicate(self, use_case, mock_user_repository):
        mock_user_repository.get_by_username_or_email.return_value = user_factory.create_domain_user(
            username="@testuser"
        )

        with pytest.raises(ConflictError, match="Username already exists"):
            await use_case.execute(RegisterSchema(**user_factory.create_register_data()))

        mock_user_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_rejects_weak_password(self, use_case, mock_user_repository):
        with pytest.raises(ValidationError):
            await use_case.execute(RegisterSchema(**user_factory.create_register_data(password="nodigits")))

        mock_user_repository.get_by_username_or_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_repository_failure(self, use_case, mock_user_repository):
        mock_user_repository.get_by_username_or_email.return_value = None
        mock_user_repository.create.return_value = user_factory.create_domain_user(id=None)

        with pytest.raises(RuntimeError, match="User creation failed - no ID assigned"):
            await use_case.execute(RegisterSchema(**user_factory.create_register_data()))


class TestLoginUseCase:
    @pytest.fixture
    def limiter(self):
        return InMemoryLoginRateLimiter(max_attempts=2, window_seconds=300)

    @pytest.fixture
    def use_case(self, mock_user_repository, mock_auth_service, limiter):
        return LoginUseCase(mock_user_repository, mock_auth_service, limiter)

    @pytest.mark.asyncio
    async def test_login_accepts_username_without_at(self, use_case, mock_user_repository, mock_auth_service):
        mock_user_repository.get_by_username.return_value = user_factory.create_domain_user()
        mock_auth_service.verify_password.return_value = True
        mock_auth_service.create_access_token.return_value = "token"

        token = await use_case.execute("testuser", "password123", "127.0.0.1")

        assert token.access_token == "token"
        assert token.token_type == "bearer"
        mock_user_repository.get_by_username.assert_called_once_with("@testuser")

    @pytest.mark.asyncio
    async def test_failed_logins_lock_out_client(self, use_case, mock_user_repository, mock_auth_service):
        mock_user_repository.get_by_username.return_value = user_factory.create_domain_user()
        mock_auth_service.verify_password.return_value = False

        for _ in range(2):
            with pytest.raises(AuthenticationError):
                await use_case.execute("testuser", "wrong", "127.0.0.1")

        mock_auth_service.verify_password.return_value = True
        with pytest.raises(RateLimitExceededError):
            await use_case.execute("testuser", "password123", "127.0.0.1")

    @pytest.mark.asyncio
    async def test_success_resets_failures(self, use_case, mock_user_repository, mock_auth_service, limiter):
        mock_user_repository.get_by_username.return_value = user_factory.create_domain_user()
        mock_auth_service.verify_password.return_value = False
        with pytest.raises(AuthenticationError):
            await use_case.execute("testuser", "wrong", "127.0.0.1")

        mock_auth_service.verify_password.return_value = True
        mock_auth_service.create_access_token.return_value = "token"
        await use_case.execute("testuser", "password123", "127.0.0.1")

        assert limiter.is_blocked("127.0.0.1") is False


class TestUserManagementUseCases:
    @pytest.mark.asyncio
    async def test_plain_user_cannot_edit_others(self, mock_user_repository):
        actor = user_factory.create_domain_user(id=1)
        mock_user_repository.get_by_id.return_value = user_factory.create_domain_user(id=2, username="@other")

        with pytest.raises(PermissionDeniedError):
            await UpdateUserUseCase(mock_user_repository).execute(actor, 2, UserUpdateSchema(nickname="Hacked"))

        mock_user_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_non_admin_cannot_change_own_role(self, mock_user_repository):
        actor = user_factory.create_domain_user(id=1)
        mock_user_repository.get_by_id.return_value = actor

        with pytest.raises(PermissionDeniedError):
            await UpdateUserUseCase(mock_user_repository).execute(actor, 1, UserUpdateSchema(role=Role.ADMIN))

    @pytest.mark.asyncio
    async def test_admin_promotes_user(self, mock_user_repository):
        admin = user_factory.create_domain_user(id=1, role=Role.ADMIN)
        target = user_factory.create_domain_user(id=2, username="@other")
        mock_user_repository.get_by_id.return_value = target
        mock_user_repository.update.side_effect = lambda user: user

        result = await UpdateUserUseCase(mock_user_repository).execute(
            admin, 2, UserUpdateSchema(role=Role.MODERATOR)
        )

        assert result.role == Role.MODERATOR

    @pytest.mark.asyncio
    async def test_email_taken_by_someone_else(self, mock_user_repository):
        actor = user_factory.create_domain_user(id=1)
        mock_user_repository.get_by_id.return_value = actor
        mock_user_repository.get_by_email.return_value = user_factory.create_domain_user(id=2)

        with pytest.raises(ConflictError):
            await UpdateUserUseCase(mock_user_repository).execute(
                actor, 1, UserUpdateSchema(email="taken@example.com")
            )

    @pytest.mark.asyncio
    async def test_user_cannot_delete_self(self, mock_user_repository, mock_review_repository, mock_movie_repository):
        actor = user_factory.create_domain_user(id=1, role=Role.ADMIN)
        mock_user_repository.get_by_id.return_value = actor

        with pytest.raises(PermissionDeniedError):
            await DeleteUserUseCase(mock_user_repository, mock_review_repository, mock_movie_repository).execute(
                actor, 1
            )

        mock_user_repository.delete.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_missing_user(self, mock_user_repository, mock_review_repository, mock_movie_repository):
        mock_user_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await DeleteUserUseCase(mock_user_repository, mock_review_repository, mock_movie_repository).execute(
                user_factory.create_domain_user(), 5
            )

    @pytest.mark.asyncio
    async def test_delete_user_refreshes_reviewed_movies(
        self, mock_user_repository, mock_review_repository, mock_movie_repository
    ):
        mock_user_repository.get_by_id.return_value = user_factory.create_domain_user(id=5)
        mock_user_repository.delete.return_value = True
        mock_review_repository.get_by_user_id.return_value = [
            review_factory.create_domain_review(id=1, user_id=5, movie_id=4),
            review_factory.create_domain_review(id=2, user_id=5, movie_id=2),
            review_factory.create_domain_review(id=3, user_id=5, movie_id=4),
        ]
        mock_review_repository.average_rating.side_effect = [None, 6.5]

        await DeleteUserUseCase(mock_user_repository, mock_review_repository, mock_movie_repository).execute(
            user_factory.create_domain_user(id=1, role=Role.ADMIN), 5
        )

        mock_user_repository.delete.assert_called_once_with(5)
        assert mock_movie_repository.update_rating.call_args_list == [call(2, 0.0), call(4, 6.5)]


class TestMovieUseCases:
    @pytest.mark.asyncio
    async def test_only_admin_creates_movies(self, mock_movie_repository, mock_person_repository):
        with pytest.raises(PermissionDeniedError):
            await CreateMovieUseCase(mock_movie_repository, mock_person_repository).execute(
                user_factory.create_domain_user(role=Role.MODERATOR), MovieSchema(title="Heat")
            )

    @pytest.mark.asyncio
    async def test_duplicate_title(self, mock_movie_repository, mock_person_repository):
        mock_movie_repository.get_by_title.return_value = movie_factory.create_domain_movie(title="Heat")

        with pytest.raises(ConflictError):
            await CreateMovieUseCase(mock_movie_repository, mock_person_repository).execute(
                user_factory.create_domain_user(role=Role.ADMIN), MovieSchema(title="Heat")
            )

    @pytest.mark.asyncio
    async def test_create_movie_with_unknown_person(self, mock_movie_repository, mock_person_repository):
        mock_movie_repository.get_by_title.return_value = None
        mock_person_repository.get_by_ids.return_value = [person_factory.create_domain_person(id=1)]

        with pytest.raises(NotFoundError, match="999"):
            await CreateMovieUseCase(mock_movie_repository, mock_person_repository).execute(
                user_factory.create_domain_user(role=Role.ADMIN), MovieSchema(title="Heat", people_ids=[1, 999])
            )

        mock_movie_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_movie_without_people_skips_lookup(self, mock_movie_repository, mock_person_repository):
        mock_movie_repository.get_by_title.return_value = None
        mock_movie_repository.create.return_value = movie_factory.create_domain_movie(id=3, title="Heat")

        result = await CreateMovieUseCase(mock_movie_repository, mock_person_repository).execute(
            user_factory.create_domain_user(role=Role.ADMIN), MovieSchema(title="Heat")
        )

        assert result.id == 3
        mock_person_repository.get_by_ids.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_movie_with_unknown_person(self, mock_movie_repository, mock_person_repository):
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=3, title="Heat")
        mock_movie_repository.get_by_title.return_value = None
        mock_person_repository.get_by_ids.return_value = []

        with pytest.raises(NotFoundError):
            await UpdateMovieUseCase(mock_movie_repository, mock_person_repository).execute(
                user_factory.create_domain_user(role=Role.ADMIN), 3, MovieSchema(title="Heat", people_ids=[7])
            )

        mock_movie_repository.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_movies_translates_page_to_offset(self, mock_movie_repository):
        mock_movie_repository.search.return_value = ([movie_factory.create_domain_movie(id=31)], 31)

        page = await GetMoviesUseCase(mock_movie_repository).execute(MovieFilter(page=3, limit=15, sort="rating_desc"))

        assert page.total == 31
        assert page.total_pages == 3
        assert [movie.id for movie in page.movies] == [31]
        mock_movie_repository.search.assert_called_once_with(
            offset=30, limit=15, search=None, genre=None, person_id=None, sort="rating_desc"
        )


class TestPeopleStatsUseCase:
    @pytest.mark.asyncio
    async def test_stats(self, mock_person_repository):
        mock_person_repository.count_by_profession.return_value = {"actor": 4, "director": 2, "writer": 1}

        stats = await GetPeopleStatsUseCase(mock_person_repository).execute()

        assert stats.total == 7
        assert stats.actors == 4
        assert stats.directors == 2
        assert stats.producers == 0


class TestPersonUseCases:
    @pytest.mark.asyncio
    async def test_create_person_with_unknown_movie(self, mock_person_repository, mock_movie_repository):
        mock_movie_repository.get_by_ids.return_value = []

        with pytest.raises(NotFoundError, match="999"):
            await CreatePersonUseCase(mock_person_repository, mock_movie_repository).execute(
                user_factory.create_domain_user(role=Role.ADMIN),
                PersonSchema(first_name="Al", last_name="Pacino", profession="actor", movie_ids=[999]),
            )

        mock_person_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_person_links_known_movies(self, mock_person_repository, mock_movie_repository):
        mock_person_repository.get_by_id.return_value = person_factory.create_domain_person(id=2)
        mock_person_repository.update.side_effect = lambda person: person
        mock_movie_repository.get_by_ids.return_value = [
            movie_factory.create_domain_movie(id=3),
            movie_factory.create_domain_movie(id=5),
        ]

        result = await UpdatePersonUseCase(mock_person_repository, mock_movie_repository).execute(
            user_factory.create_domain_user(role=Role.ADMIN),
            2,
            PersonSchema(first_name="Al", last_name="Pacino", profession="Actor", movie_ids=[3, 5]),
        )

        assert result.movie_ids == [3, 5]
        assert result.profession == "actor"
        mock_movie_repository.get_by_ids.assert_called_once_with([3, 5])


class TestReviewUseCases:
    @pytest.mark.asyncio
    async def test_create_review_refreshes_rating(self, mock_review_repository, mock_movie_repository):
        author = user_factory.create_domain_user(id=1)
        mock_movie_repository.get_by_id.return_value = movie_factory.create_domain_movie(id=3)
        mock_review_repository.create.return_value = review_factory.create_domain_review(movie_id=3, rating=8)
        mock_review_repository.average_rating.return_value = 7.666666

        await CreateReviewUseCase(mock_review_repository, mock_movie_repository).execute(
            author, ReviewSchema(movie_id=3, title="Good", body="Nice", rating=8)
        )

        mock_movie_repository.update_rating.assert_called_once_with(3, 7.7)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("rating", [0, 11])
    async def test_create_review_rejects_rating(self, mock_review_repository, mock_movie_repository, rating):
        with pytest.raises(ValidationError):
            await CreateReviewUseCase(mock_review_repository, mock_movie_repository).execute(
                user_factory.create_domain_user(), ReviewSchema(movie_id=3, title="Bad", body="Bad", rating=rating)
            )

        mock_review_repository.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_review_for_missing_movie(self, mock_review_repository, mock_movie_repository):
        mock_movie_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await CreateReviewUseCase(mock_review_repository, mock_movie_repository).execute(
                user_factory.create_domain_user(), ReviewSchema(movie_id=3, title="Good", body="Nice", rating=8)
            )

    @pytest.mark.asyncio
    async def test_update_review_by_stranger(self, mock_review_repository, mock_movie_repository):
        mock_review_repository.get_by_id.return_value = review_factory.create_domain_review(user_id=1)

        with pytest.raises(PermissionDeniedError):
            await UpdateReviewUseCase(mock_review_repository, mock_movie_repository).execute(
                user_factory.create_domain_user(id=2), 1, ReviewUpdate(rating=1)
            )

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, mock_review_repository, mock_movie_repository):
        mock_review_repository.get_by_id.return_value = review_factory.create_domain_review(user_id=1, rating=8)
        mock_review_repository.update.side_effect = lambda review: review
        mock_review_repository.average_rating.return_value = 3.0

        result = await UpdateReviewUseCase(mock_review_repository, mock_movie_repository).execute(
            user_factory.create_domain_user(id=1), 1, ReviewUpdate(rating=3)
        )

        assert result.rating == 3
        assert result.title == "Great"
        mock_movie_repository.update_rating.assert_called_once_with(1, 3.0)

    @pytest.mark.asyncio
    async def test_moderator_deletes_review_and_rating_resets(self, mock_review_repository, mock_movie_repository):
        mock_review_repository.get_by_id.return_value = review_factory.create_domain_review(user_id=1, movie_id=4)
        mock_review_repository.delete.return_value = True
        mock_review_repository.average_rating.return_value = None

        await DeleteReviewUseCase(mock_review_repository, mock_movie_repository).execute(
            user_factory.create_domain_user(id=9, role=Role.MODERATOR), 1
        )

        mock_movie_repository.update_rating.assert_called_once_with(4, 0.0)


class TestFriendshipUseCases:
    @pytest.fixture
    def requester(self):
        return user_factory.create_domain_user(id=1)

    @pytest.mark.asyncio
    async def test_cannot_befriend_self(self, mock_friendship_repository, mock_user_repository, requester):
        with pytest.raises(ValidationError):
            await SendFriendRequestUseCase(mock_friendship_repository, mock_user_repository).execute(requester, 1)

    @pytest.mark.asyncio
    async def test_unknown_addressee(self, mock_friendship_repository, mock_user_repository, requester):
        mock_user_repository.get_by_id.return_value = None

        with pytest.raises(NotFoundError):
            await SendFriendRequestUseCase(mock_friendship_repository, mock_user_repository).execute(requester, 2)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status", [FriendRequestStatus.PENDING, FriendRequestStatus.ACCEPTED])
    async def test_existing_relationship_conflicts(
        self, mock_friendship_repository, mock_user_repository, requester, status
    ):
        mock_user_repository.get_by_id.return_value = user_factory.create_domain_user(id=2)
        mock_friendship_repository.get_between.return_value = [
            friend_request_factory.create_domain_request(requester_id=2, addressee_id=1, status=status)
        ]

        with pytest.raises(ConflictError):
            await SendFriendRequestUseCase(mock_friendship_repository, mock_user_repository).execute(requester, 2)

    @pytest.mark.asyncio
    async def test_rejected_request_is_reopened(self, mock_friendship_repository, mock_user_repository, requester):
        mock_user_repository.get_by_id.return_value = user_factory.create_domain_user(id=2)
        mock_friendship_repository.get_between.return_value = [
            friend_request_factory.create_domain_request(id=7, status=FriendRequestStatus.REJECTED)
        ]
        mock_friendship_repository.update_status.return_value = friend_request_factory.create_domain_request(id=7)

        result = await SendFriendRequestUseCase(mock_friendship_repository, mock_user_repository).execute(requester, 2)

        assert result.status == FriendRequestStatus.PENDING
        mock_friendship_repository.update_status.assert_called_once_with(7, FriendRequestStatus.PENDING)
        mock_friendship_repository.create_request.assert_not_called()

    @pytest.mark.asyncio
    async def test_only_addressee_can_respond(self, mock_friendship_repository):
        mock_friendship_repository.get_by_id.return_value = friend_request_factory.create_domain_request()

        with pytest.raises(PermissionDeniedError):
            await RespondFriendRequestUseCase(mock_friendship_repository).execute(
                user_factory.create_domain_user(id=1), 1, accept=True
            )

    @pytest.mark.asyncio
    async def test_answered_request_cannot_be_answered_again(self, mock_friendship_repository):
        mock_friendship_repository.get_by_id.return_value = friend_request_factory.create_domain_request(
            status=FriendRequestStatus.REJECTED
        )

        with pytest.raises(ConflictError):
            await RespondFriendRequestUseCase(mock_friendship_repository).execute(
                user_factory.create_domain_user(id=2), 1, accept=True
            )
