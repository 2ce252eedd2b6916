"""Health check endpoint."""

import time
from fastapi import APIRouter

from ledforms.models.responses import HealthResponse
from ledforms.validators.schemas import get_all_forms

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health: the service is degraded when no form schema loaded."""
    forms_loaded = len(get_all_forms())

    return HealthResponse(
        status="healthy" if forms_loaded else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        forms_loaded=forms_loaded,
    )
