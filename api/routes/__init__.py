"""
API Routes Module.

This module combines all route modules into a single router.
"""
from fastapi import APIRouter

from .health import router as health_router
from .dates import router as dates_router
from .rnokpp import router as rnokpp_router
from .text import router as text_router

# Combined router that includes all sub-routers
router = APIRouter()

router.include_router(health_router)
router.include_router(dates_router)
router.include_router(rnokpp_router)
router.include_router(text_router)

__all__ = ["router"]
