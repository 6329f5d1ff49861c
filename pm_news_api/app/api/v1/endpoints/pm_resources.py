"""
PM resource endpoints for API v1.

CRUD routes for the product‑management resource directory.  Listing
supports exact filters on resource type, PM stage and difficulty, a
company substring filter and an any‑of tag filter; results are
returned most recently created first.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from pm_news_api.app.api.v1.query import pm_resource_filters
from pm_news_api.app.core.storage import MemStorage, get_storage
from pm_news_api.app.schemas.filters import PmResourceFilters
from pm_news_api.app.schemas.pm_resource import PmResourceCreate, PmResourceRead, PmResourceUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "PM resource not found"


@router.get("", response_model=List[PmResourceRead])
async def list_pm_resources(
    filters: PmResourceFilters = Depends(pm_resource_filters),
    storage: MemStorage = Depends(get_storage),
) -> List[PmResourceRead]:
    """Return a filtered, paginated list of PM resources."""
    try:
        return await storage.list_pm_resources(filters)
    except Exception:
        logger.exception("Failed to fetch PM resources")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch PM resources")


@router.get("/{resource_id}", response_model=PmResourceRead)
async def get_pm_resource(resource_id: str, storage: MemStorage = Depends(get_storage)) -> PmResourceRead:
    try:
        resource = await storage.get_pm_resource(resource_id)
    except Exception:
        logger.exception("Failed to fetch PM resource %s", resource_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch PM resource")
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return resource


@router.post("", response_model=PmResourceRead, status_code=status.HTTP_201_CREATED)
async def create_pm_resource(
    resource_in: PmResourceCreate,
    storage: MemStorage = Depends(get_storage),
) -> PmResourceRead:
    try:
        return await storage.create_pm_resource(resource_in)
    except Exception:
        logger.exception("Failed to create PM resource")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create PM resource")


@router.put("/{resource_id}", response_model=PmResourceRead)
async def update_pm_resource(
    resource_id: str,
    updates: PmResourceUpdate,
    storage: MemStorage = Depends(get_storage),
) -> PmResourceRead:
    """Update an existing PM resource; unspecified fields remain unchanged."""
    try:
        resource = await storage.update_pm_resource(resource_id, updates)
    except Exception:
        logger.exception("Failed to update PM resource %s", resource_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update PM resource")
    if resource is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return resource


@router.delete("/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_pm_resource(resource_id: str, storage: MemStorage = Depends(get_storage)) -> None:
    try:
        deleted = await storage.delete_pm_resource(resource_id)
    except Exception:
        logger.exception("Failed to delete PM resource %s", resource_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete PM resource")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
