"""Health check endpoints."""
from fastapi import APIRouter

from models.schemas import HealthResponse
from utils.date_utils import get_current_date

API_VERSION = "0.1.0"

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Check that the service is up.

    The helpers are stateless, so there is nothing to warm up; the server
    date is returned to make clock or timezone drift visible.
    """
    return HealthResponse(
        status="ok",
        version=API_VERSION,
        current_date=get_current_date()
    )
