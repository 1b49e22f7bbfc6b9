"""Health check routes"""

from fastapi import APIRouter, Depends, Request
import logging

from api.dependencies import get_settings
from api.responses import HealthResponse
from app.config import Settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("foodorder.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(request: Request, settings: Settings = Depends(get_settings)):
    """Basic health check endpoint"""
    database_ok = request.app.state.database.ping()
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        database="healthy" if database_ok else "unhealthy",
    )
