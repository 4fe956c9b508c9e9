from flickly.domain.models.movie import Movie
from flickly.domain.models.recommendation import MovieScore, ScoreBreakdown, ScoringSettings, TasteProfile

SELECTED_GENRE_FACTOR = 0.5
SELECTED_PEOPLE_FACTOR = 0.3
FRIENDS_GENRE_FACTOR = 0.6
FRIENDS_PEOPLE_FACTOR = 0.4


def score_movie(movie: Movie, profile: TasteProfile, settings: ScoringSettings) -> MovieScore:
    """Score one candidate movie as a weighted sum of the enabled signals"""
    breakdown = ScoreBreakdown()

    genre_match = bool(movie.genre) and movie.genre in profile.liked_genres
    people_overlap = sorted({person_id for person_id in movie.people_ids if person_id in profile.liked_people_ids})

    if settings.use_rating:
        breakdown.rating = (movie.rating or 0.0) * settings.rating_weight

    if settings.use_genres and genre_match:
        breakdown.genre = settings.genre_weight

    if settings.use_people:
        breakdown.people = len(people_overlap) * settings.people_weight

    from_selected_movies = False
    if settings.use_selected_movies:
        if genre_match:
            breakdown.selected_movies += SELECTED_GENRE_FACTOR * settings.selected_movies_weight
        breakdown.selected_movies += SELECTED_PEOPLE_FACTOR * settings.selected_movies_weight * len(people_overlap)
        from_selected_movies = genre_match or bool(people_overlap)

    from_friends = False
    if settings.use_friends:
        friend_genre_match = bool(movie.genre) and movie.genre in profile.friend_liked_genres
        friend_overlap = len({person_id for person_id in movie.people_ids if person_id in profile.friend_liked_people_ids})
        if friend_genre_match:
            breakdown.friends += FRIENDS_GENRE_FACTOR * settings.friends_weight
        breakdown.friends += FRIENDS_PEOPLE_FACTOR * settings.friends_weight * friend_overlap
        from_friends = friend_genre_match or friend_overlap > 0

    return MovieScore(
        score=breakdown.total,
        breakdown=breakdown,
        matched_genres=[movie.genre] if settings.use_genres and genre_match else [],
        matched_people_ids=people_overlap if settings.use_people else [],
        from_selected_movies=from_selected_movies,
        from_friends=from_friends,
    )
