"""
Filter options endpoint for API v1.

Returns the distinct values of every filterable field so the client
can populate its filter pickers.  Recomputed on every request.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from pm_news_api.app.core.storage import MemStorage, get_storage
from pm_news_api.app.schemas.filters import FilterOptions
from pm_news_api.app.services.filter_service import FilterService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=FilterOptions)
async def get_filter_options(storage: MemStorage = Depends(get_storage)) -> FilterOptions:
    try:
        return await FilterService.get_filter_options(storage)
    except Exception:
        logger.exception("Failed to fetch filter options")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Failed to fetch filter options")
