"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from ledforms.api.health import router as health_router
from ledforms.api.forms import router as forms_router
from ledforms.api.formatting import router as formatting_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Form schemas + validation
api_router.include_router(forms_router, tags=["Forms"])

# Formatting helpers
api_router.include_router(formatting_router, tags=["Formatting"])
