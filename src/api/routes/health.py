"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import get_mongodb_client
from api.dependencies import get_settings
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(settings: Settings = Depends(get_settings)):
    """Health check endpoint with dependency status."""
    health_status = {
        "success": True,
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {
            "email": {"status": "enabled" if settings.enable_email else "disabled"},
            "ai": {"status": "enabled" if settings.llm_enabled else "disabled"},
        },
    }

    mongodb_healthy = False
    try:
        mongo_client = get_mongodb_client(settings.mongo_url)
        if mongo_client:
            mongo_client.admin.command('ping')
            mongodb_healthy = True
            health_status["services"]["mongodb"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["mongodb"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
    except PyMongoError as e:
        health_status["services"]["mongodb"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }

    if not mongodb_healthy:
        health_status["success"] = False
        health_status["status"] = "degraded"

    return JSONResponse(
        content=health_status,
        status_code=status.HTTP_200_OK if mongodb_healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
    )
