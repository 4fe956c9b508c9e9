from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from flickly.domain.exceptions import NotFoundError
from flickly.domain.models.review import Review as DomainReview
from flickly.domain.ports.repositories.review_repository import ReviewRepository
from flickly.infrastructure.persistence.models import Review as SQLReview

NEWEST_FIRST = (SQLReview.created_at.desc(), SQLReview.id.desc())


class SQLAlchemyReviewRepository(ReviewRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_review: SQLReview) -> DomainReview:
        return DomainReview(
            id=sql_review.id,
            user_id=sql_review.user_id,
            movie_id=sql_review.movie_id,
            title=sql_review.title,
            body=sql_review.body,
            rating=sql_review.rating,
            created_at=sql_review.created_at,
        )

    async def create(self, review: DomainReview) -> DomainReview:
        sql_review = SQLReview(
            user_id=review.user_id,
            movie_id=review.movie_id,
            title=review.title,
            body=review.body,
            rating=review.rating,
        )
        self.session.add(sql_review)
        await self.session.commit()
        await self.session.refresh(sql_review)
        return self._to_domain(sql_review)

    async def get_by_id(self, review_id: int) -> Optional[DomainReview]:
        sql_review = await self.session.scalar(select(SQLReview).where(SQLReview.id == review_id))
        return self._to_domain(sql_review) if sql_review else None

    async def get_all(self) -> List[DomainReview]:
        result = await self.session.scalars(select(SQLReview).order_by(*NEWEST_FIRST))
        return [self._to_domain(row) for row in result.all()]

    async def get_by_movie_id(self, movie_id: int) -> List[DomainReview]:
        result = await self.session.scalars(
            select(SQLReview).where(SQLReview.movie_id == movie_id).order_by(*NEWEST_FIRST)
        )
        return [self._to_domain(row) for row in result.all()]

    async def get_by_user_id(self, user_id: int) -> List[DomainReview]:
        result = await self.session.scalars(
            select(SQLReview).where(SQLReview.user_id == user_id).order_by(*NEWEST_FIRST)
        )
        return [self._to_domain(row) for row in result.all()]

    async def get_by_user_ids(self, user_ids: List[int]) -> List[DomainReview]:
        if not user_ids:
            return []
        result = await self.session.scalars(
            select(SQLReview).where(SQLReview.user_id.in_(user_ids)).order_by(*NEWEST_FIRST)
        )
        return [self._to_domain(row) for row in result.all()]

    async def update(self, review: DomainReview) -> DomainReview:
        sql_review = await self.session.scalar(select(SQLReview).where(SQLReview.id == review.id))
        if not sql_review:
            raise NotFoundError(f"Review with id {review.id} not found")

        sql_review.title = review.title
        sql_review.body = review.body
        sql_review.rating = review.rating

        await self.session.commit()
        await self.session.refresh(sql_review)
        return self._to_domain(sql_review)

    async def delete(self, review_id: int) -> bool:
        sql_review = await self.session.scalar(select(SQLReview).where(SQLReview.id == review_id))
        if not sql_review:
            return False

        await self.session.delete(sql_review)
        await self.session.commit()
        return True

    async def average_rating(self, movie_id: int) -> Optional[float]:
        average = await self.session.scalar(select(func.avg(SQLReview.rating)).where(SQLReview.movie_id == movie_id))
        return float(average) if average is not None else None
