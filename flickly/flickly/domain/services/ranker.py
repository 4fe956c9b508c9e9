import math
from typing import List, Sequence, TypeVar

from flickly.domain.exceptions import InvalidPageError
from flickly.domain.models.recommendation import RankedMovie

T = TypeVar("T")


def rank_movies(scored: Sequence[RankedMovie]) -> List[RankedMovie]:
    """Order by score descending; equal scores fall back to ascending movie id"""
    return sorted(scored, key=lambda movie: (-movie.score, movie.id if movie.id is not None else math.inf))


def total_pages(total_items: int, page_size: int) -> int:
    if page_size < 1:
        raise InvalidPageError(f"Page size must be at least 1, got {page_size}")
    return max(1, math.ceil(total_items / page_size))


def get_page(items: Sequence[T], page_number: int, page_size: int) -> List[T]:
    """Return the 1-indexed page of `items`.

    Raises:
        InvalidPageError: page_size < 1, page_number < 1 or past the last page
    """
    pages = total_pages(len(items), page_size)
    if page_number < 1 or page_number > pages:
        raise InvalidPageError(f"Page {page_number} is out of range (1-{pages})")

    start = (page_number - 1) * page_size
    return list(items[start : start + page_size])
