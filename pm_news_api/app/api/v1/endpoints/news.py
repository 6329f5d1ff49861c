"""
News item endpoints for API v1.

These routes list, retrieve, create, update and delete AI news items.
The list endpoint accepts the filters described in ``query.py`` and
returns items newest first (ties broken by gravity score).
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from pm_news_api.app.api.v1.query import news_filters
from pm_news_api.app.core.storage import MemStorage, get_storage
from pm_news_api.app.schemas.filters import NewsFilters
from pm_news_api.app.schemas.news import NewsItemCreate, NewsItemRead, NewsItemUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

NOT_FOUND = "News item not found"


@router.get("", response_model=List[NewsItemRead])
async def list_news_items(
    filters: NewsFilters = Depends(news_filters),
    storage: MemStorage = Depends(get_storage),
) -> List[NewsItemRead]:
    """Return a filtered, paginated list of news items.

    - **company**, **industry**: case-insensitive substring match.
    - **implementationType**: exact match.
    - **relevanceCategories**: comma-joined list; an item matches if it
      has any of them.
    - **isBreakthrough**: `true` or `false`.
    - **limit** (default 20), **offset** (default 0): pagination.
    """
    try:
        return await storage.list_news_items(filters)
    except Exception:
        logger.exception("Failed to fetch news items")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch news items")


@router.get("/{item_id}", response_model=NewsItemRead)
async def get_news_item(item_id: str, storage: MemStorage = Depends(get_storage)) -> NewsItemRead:
    """Retrieve a single news item by its ID.  Returns 404 if absent."""
    try:
        item = await storage.get_news_item(item_id)
    except Exception:
        logger.exception("Failed to fetch news item %s", item_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch news item")
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return item


@router.post("", response_model=NewsItemRead, status_code=status.HTTP_201_CREATED)
async def create_news_item(
    item_in: NewsItemCreate,
    storage: MemStorage = Depends(get_storage),
) -> NewsItemRead:
    """Create a news item.

    The server assigns ``id`` and ``createdAt``; ``publishedAt``
    defaults to the current time.  Invalid bodies yield HTTP 400.
    """
    try:
        return await storage.create_news_item(item_in)
    except Exception:
        logger.exception("Failed to create news item")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to create news item")


@router.put("/{item_id}", response_model=NewsItemRead)
async def update_news_item(
    item_id: str,
    updates: NewsItemUpdate,
    storage: MemStorage = Depends(get_storage),
) -> NewsItemRead:
    """Update an existing news item.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        item = await storage.update_news_item(item_id, updates)
    except Exception:
        logger.exception("Failed to update news item %s", item_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to update news item")
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news_item(item_id: str, storage: MemStorage = Depends(get_storage)) -> None:
    """Delete a news item permanently."""
    try:
        deleted = await storage.delete_news_item(item_id)
    except Exception:
        logger.exception("Failed to delete news item %s", item_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to delete news item")
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return None
