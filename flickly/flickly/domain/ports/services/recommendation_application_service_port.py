from abc import ABC, abstractmethod
from typing import List

from flickly.domain.models.recommendation import RankedMovie, RecommendationPage, ScoringSettings


class RecommendationApplicationServicePort(ABC):
    """Port for recommendation generation operations"""

    @abstractmethod
    async def generate_recommendations(self, user_id: int, settings: ScoringSettings) -> List[RankedMovie]:
        """Rank every candidate movie for the user"""
        pass

    @abstractmethod
    async def get_recommendation_page(
        self, user_id: int, settings: ScoringSettings, page: int = 1, page_size: int = 20
    ) -> RecommendationPage:
        """Rank candidates for the user and return one page of them"""
        pass
