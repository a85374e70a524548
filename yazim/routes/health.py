"""
Health check endpoint for monitoring.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Request, status
from yazim.schemas.spellcheck import HealthResponse
from yazim.utils.logger import get_logger

logger = get_logger("health")
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check application and dictionary status",
    responses={
        200: {"description": "Service is up (healthy, or degraded with an empty dictionary)"},
        503: {"description": "Dictionary is not loaded"}
    }
)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Checks:
    - Application is running
    - Dictionary is loaded, and not empty

    Returns:
        HealthResponse (200 if loaded, 503 if not)
    """
    service = getattr(request.app.state, "spellcheck_service", None)

    if service is None or not service.is_loaded():
        logger.warning("Health check: dictionary not loaded")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "status": "unavailable",
                "dictionary": "not loaded",
                "timestamp": datetime.now(timezone.utc).isoformat()
            }
        )

    index = service.index
    if index.base_word_count == 0:
        logger.warning("Health check: dictionary is empty")
        health_status = "degraded"
    else:
        logger.debug("Health check: all systems operational")
        health_status = "healthy"

    return HealthResponse(
        status=health_status,
        dictionary_words=index.base_word_count,
        personal_words=len(index.overlay_words()),
        timestamp=datetime.now(timezone.utc)
    )
