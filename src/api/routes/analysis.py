"""AI analysis routes for listing and location data."""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_analysis_service
from api.errors import error_body
from api.models import AnalysisResponse, LocationTrendsRequest, PropertyAnalysisRequest
from domain.model.analysis import AnalysisResult
from services.analysis_service import PropertyAnalysisService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["ai"])


def _to_response(result: AnalysisResult):
    if result.failed:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(result.text),
        )
    return AnalysisResponse(analysis=result.text)


@router.post("/properties", response_model=AnalysisResponse)
async def analyze_properties(
    request: PropertyAnalysisRequest,
    service: PropertyAnalysisService = Depends(get_analysis_service),
):
    """Summarize up to three properties against the given filter criteria."""
    result = await service.analyze_properties(
        properties=request.properties,
        city=request.city,
        max_price=request.max_price,
        property_category=request.property_category,
        property_type=request.property_type,
    )
    return _to_response(result)


@router.post("/locations", response_model=AnalysisResponse)
async def analyze_locations(
    request: LocationTrendsRequest,
    service: PropertyAnalysisService = Depends(get_analysis_service),
):
    """Summarize price trends for up to five locations."""
    result = await service.analyze_location_trends(request.locations, request.city)
    return _to_response(result)
