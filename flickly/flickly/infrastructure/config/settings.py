from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    DATABASE_URL: str
    DATABASE_ECHO: bool = False
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 120

    LOGIN_MAX_ATTEMPTS: int = 10
    LOGIN_WINDOW_SECONDS: int = 300


class RecommendationSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="REC_", extra="ignore")

    page_size: int = 20
    list_page_size: int = 15
    max_page_size: int = 100

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
