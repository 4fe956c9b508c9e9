from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from flickly.applications.interfaces.dtos.recommendation import RecommendationPageResponse, RecommendationQuery
from flickly.domain.exceptions import DataUnavailableError, InvalidPageError, NotFoundError
from flickly.domain.models.recommendation import ScoringSettings
from flickly.domain.models.user import User
from flickly.domain.ports.services.recommendation_application_service_port import (
    RecommendationApplicationServicePort,
)
from flickly.infrastructure.config.dependencies import (
    get_current_user,
    get_recommendation_service,
    get_recommendation_settings,
)
from flickly.infrastructure.config.settings import RecommendationSettings
from flickly.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


def build_scoring_settings(query: RecommendationQuery, defaults: RecommendationSettings) -> ScoringSettings:
    """Request values win; anything omitted comes from configuration"""
    values = {
        field: getattr(defaults, field) if getattr(query, field) is None else getattr(query, field)
        for field in ScoringSettings.model_fields
    }
    return ScoringSettings(**values)


@router.get("/", response_model=RecommendationPageResponse)
async def get_recommendations(
    query: Annotated[RecommendationQuery, Query()],
    current_user: Annotated[User, Depends(get_current_user)],
    recommendation_service: Annotated[RecommendationApplicationServicePort, Depends(get_recommendation_service)],
    defaults: Annotated[RecommendationSettings, Depends(get_recommendation_settings)],
):
    """Rank unseen movies for the current user and return the requested page"""
    page_size = query.page_size if query.page_size is not None else defaults.page_size
    if page_size > defaults.max_page_size:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST, detail=f"Page size must be at most {defaults.max_page_size}"
        )

    try:
        result = await recommendation_service.get_recommendation_page(
            user_id=current_user.id,
            settings=build_scoring_settings(query, defaults),
            page=query.page,
            page_size=page_size,
        )

        return RecommendationPageResponse.model_validate(result.model_dump())

    except InvalidPageError as e:
        logger.warning(f"Bad page request for user {current_user.id}: {e}")
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=str(e))
    except DataUnavailableError as e:
        raise HTTPException(status_code=HTTPStatus.SERVICE_UNAVAILABLE, detail=str(e))
    except HTTPException:
        raise
    except Exception:
        logger.exception("Unhandled error generating recommendations")
        raise HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail="Internal server error")


@router.get("/health")
async def recommendation_health_check():
    """Health check endpoint for recommendation service"""
    return {"status": "healthy", "service": "recommendation-engine", "message": "Recommendation service is operational"}
