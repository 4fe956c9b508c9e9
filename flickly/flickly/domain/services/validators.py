import re

from flickly.domain.exceptions import ValidationError

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9._]+$")

MAX_USERNAME_LENGTH = 50
MAX_EMAIL_LENGTH = 254
MAX_NICKNAME_LENGTH = 50
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128

MIN_REVIEW_RATING = 1
MAX_REVIEW_RATING = 10


def normalize_username(username: str) -> str:
    """Return the stored form of a username: trimmed, with a leading '@'"""
    username = username.strip()
    return username if username.startswith("@") else f"@{username}"


def validate_username(username: str) -> None:
    bare = username.strip().removeprefix("@")
    if not bare or len(bare) > MAX_USERNAME_LENGTH:
        raise ValidationError("Invalid username length")
    if not USERNAME_PATTERN.match(bare):
        raise ValidationError("Only A-Za-z, 0-9, '_' and '.' allowed in username")


def validate_nickname(nickname: str) -> None:
    nickname = nickname.strip()
    if not nickname or len(nickname) > MAX_NICKNAME_LENGTH:
        raise ValidationError("Invalid nickname length")


def validate_email_length(email: str) -> None:
    if not email or len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError("Invalid email length")


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH or len(password) > MAX_PASSWORD_LENGTH:
        raise ValidationError(
            f"Password must be between {MIN_PASSWORD_LENGTH} and {MAX_PASSWORD_LENGTH} characters"
        )
    if not any(char.isdigit() for char in password):
        raise ValidationError("Password must contain at least one digit")


def is_valid_rating(rating) -> bool:
    if isinstance(rating, bool) or not isinstance(rating, int):
        return False
    return MIN_REVIEW_RATING <= rating <= MAX_REVIEW_RATING


def validate_rating(rating) -> None:
    if not is_valid_rating(rating):
        raise ValidationError(f"Rating must be an integer between {MIN_REVIEW_RATING} and {MAX_REVIEW_RATING}")
