from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from flickly.applications.interfaces.dtos.movie import MoviePublic


class RecommendationQuery(BaseModel):
    """Query parameters for a recommendation page; omitted values fall back to configured defaults"""

    page: int = 1
    page_size: Optional[int] = None

    use_rating: Optional[bool] = None
    use_genres: Optional[bool] = None
    use_people: Optional[bool] = None
    use_selected_movies: Optional[bool] = None
    use_friends: Optional[bool] = None

    rating_weight: Optional[float] = None
    genre_weight: Optional[float] = None
    people_weight: Optional[float] = None
    selected_movies_weight: Optional[float] = None
    friends_weight: Optional[float] = None

    min_rating_for_like: Optional[float] = None


class ScoringSettingsResponse(BaseModel):
    use_rating: bool
    use_genres: bool
    use_people: bool
    use_selected_movies: bool
    use_friends: bool
    rating_weight: float
    genre_weight: float
    people_weight: float
    selected_movies_weight: float
    friends_weight: float
    min_rating_for_like: float
    model_config = ConfigDict(from_attributes=True)


class ScoreBreakdownResponse(BaseModel):
    rating: float
    genre: float
    people: float
    selected_movies: float
    friends: float
    model_config = ConfigDict(from_attributes=True)


class RankedMovieResponse(MoviePublic):
    """A recommended movie with the score that placed it"""

    score: float
    breakdown: ScoreBreakdownResponse
    matched_genres: List[str]
    matched_people_ids: List[int]
    from_selected_movies: bool
    from_friends: bool


class RecommendationPageResponse(BaseModel):
    """Response schema for one page of recommendations"""

    user_id: int
    page: int
    page_size: int
    total_items: int
    total_pages: int
    settings: ScoringSettingsResponse
    recommendations: List[RankedMovieResponse]
    model_config = ConfigDict(from_attributes=True)
