"""
Top‑level router for version 1 of the API.

This router aggregates the collection routers (news, PM resources,
filter options).  When new collections are introduced, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import filters, news, pm_resources

router = APIRouter()

router.include_router(news.router, prefix="/news", tags=["news"])
router.include_router(pm_resources.router, prefix="/pm-resources", tags=["pm-resources"])
router.include_router(filters.router, prefix="/filters", tags=["filters"])
