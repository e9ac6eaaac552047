"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from app.api.heatmap import router as heatmap_router
from app.api.page import router as page_router

router = APIRouter()
router.include_router(heatmap_router)
router.include_router(page_router)
