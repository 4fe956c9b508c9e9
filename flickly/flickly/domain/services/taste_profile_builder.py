from typing import Dict, Iterable, List, Set

from flickly.domain.models.movie import Movie
from flickly.domain.models.recommendation import ScoringSettings, TasteProfile
from flickly.domain.models.review import Review
from flickly.domain.models.user import User

# Friends' reviews count as "liked" from this rating on, independent of
# ScoringSettings.min_rating_for_like.
FRIEND_LIKED_RATING = 7


def _collect(
    movie_ids: Iterable[int], movies_by_id: Dict[int, Movie], genres: Set[str], people_ids: Set[int]
) -> None:
    for movie_id in movie_ids:
        movie = movies_by_id.get(movie_id)
        if movie is None:
            continue
        if movie.genre:
            genres.add(movie.genre)
        people_ids.update(movie.people_ids)


def build_taste_profile(
    viewer: User,
    movies: List[Movie],
    reviews: List[Review],
    users: List[User],
    settings: ScoringSettings,
) -> TasteProfile:
    """Derive the viewer's taste profile from reviews, likes and friends.

    Args:
        viewer: User the recommendations are generated for
        movies: Catalog snapshot, each movie carrying its cast/crew ids
        reviews: Reviews snapshot (at least the viewer's and friends' reviews)
        users: Users snapshot used to resolve the viewer's friends
        settings: Scoring settings for this pass

    Returns:
        TasteProfile; input collections are left untouched
    """
    movies_by_id = {movie.id: movie for movie in movies if movie.id is not None}
    own_reviews = [review for review in reviews if review.user_id == viewer.id]

    profile = TasteProfile()
    profile.watched_movie_ids = {review.movie_id for review in own_reviews} | set(viewer.liked_movie_ids)

    liked_review_movie_ids = [
        review.movie_id for review in own_reviews if review.rating >= settings.min_rating_for_like
    ]
    _collect(liked_review_movie_ids, movies_by_id, profile.liked_genres, profile.liked_people_ids)

    if settings.use_selected_movies:
        _collect(viewer.liked_movie_ids, movies_by_id, profile.liked_genres, profile.liked_people_ids)

    if settings.use_friends and viewer.friend_ids:
        friend_ids = set(viewer.friend_ids)
        friends = [user for user in users if user.id in friend_ids]
        resolved_friend_ids = {friend.id for friend in friends}

        for friend in friends:
            _collect(
                friend.liked_movie_ids,
                movies_by_id,
                profile.friend_liked_genres,
                profile.friend_liked_people_ids,
            )

        friend_liked_movie_ids = [
            review.movie_id
            for review in reviews
            if review.user_id in resolved_friend_ids and review.rating >= FRIEND_LIKED_RATING
        ]
        _collect(
            friend_liked_movie_ids,
            movies_by_id,
            profile.friend_liked_genres,
            profile.friend_liked_people_ids,
        )

    return profile
