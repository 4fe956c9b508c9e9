from typing import List, Set

from pydantic import BaseModel, Field

from flickly.domain.models.movie import Movie


class ScoringSettings(BaseModel):
    """Toggles, weights and the like-threshold for one scoring pass"""

    use_rating: bool = True
    use_genres: bool = True
    use_people: bool = True
    use_selected_movies: bool = True
    use_friends: bool = True

    rating_weight: float = 1.0
    genre_weight: float = 5.0
    people_weight: float = 3.0
    selected_movies_weight: float = 4.0
    friends_weight: float = 3.0

    min_rating_for_like: float = 7.0


class TasteProfile(BaseModel):
    """Genres and people the viewer (and their friends) showed affinity for"""

    watched_movie_ids: Set[int] = Field(default_factory=set)
    liked_genres: Set[str] = Field(default_factory=set)
    liked_people_ids: Set[int] = Field(default_factory=set)
    friend_liked_genres: Set[str] = Field(default_factory=set)
    friend_liked_people_ids: Set[int] = Field(default_factory=set)


class ScoreBreakdown(BaseModel):
    rating: float = 0.0
    genre: float = 0.0
    people: float = 0.0
    selected_movies: float = 0.0
    friends: float = 0.0

    @property
    def total(self) -> float:
        return self.rating + self.genre + self.people + self.selected_movies + self.friends


class MovieScore(BaseModel):
    score: float
    breakdown: ScoreBreakdown
    matched_genres: List[str] = Field(default_factory=list)
    matched_people_ids: List[int] = Field(default_factory=list)
    from_selected_movies: bool = False
    from_friends: bool = False


class RankedMovie(Movie):
    """A catalog movie together with its score for one recommendation pass"""

    score: float = 0.0
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    matched_genres: List[str] = Field(default_factory=list)
    matched_people_ids: List[int] = Field(default_factory=list)
    from_selected_movies: bool = False
    from_friends: bool = False


class RecommendationPage(BaseModel):
    user_id: int
    page: int
    page_size: int
    total_items: int
    total_pages: int
    settings: ScoringSettings
    recommendations: List[RankedMovie]
