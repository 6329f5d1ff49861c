"""
Query string parsing for the list endpoints.

Query parameters arrive as strings.  The dependencies below turn them
into the typed filter structures the store expects:

* multi‑valued parameters (``relevanceCategories``, ``tags``) accept a
  comma‑joined string, repeated parameters, or both
  (``?tags=a,b&tags=c``);
* single‑valued parameters given more than once use the last value,
  and blank values mean "no filter";
* ``isBreakthrough`` is ``True`` only for the string ``true`` (any
  case); any other value filters for ``False``.

Invalid ``limit``/``offset`` values are rejected by FastAPI and turned
into HTTP 400 by the application's validation error handler.
"""

from typing import List, Optional

from fastapi import Query

from pm_news_api.app.core.config import settings
from pm_news_api.app.schemas.filters import NewsFilters, PmResourceFilters


def split_multi_value(values: Optional[List[str]]) -> Optional[List[str]]:
    """Flatten repeated and comma‑joined values into a de‑duplicated list."""
    if not values:
        return None
    result: List[str] = []
    for raw in values:
        for part in raw.split(","):
            part = part.strip()
            if part and part not in result:
                result.append(part)
    return result or None


def clean_value(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_bool_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    return value.strip().lower() == "true"


def news_filters(
    company: Optional[str] = Query(None, description="Case-insensitive company substring"),
    implementation_type: Optional[str] = Query(None, alias="implementationType"),
    relevance_categories: Optional[List[str]] = Query(
        None,
        alias="relevanceCategories",
        description="Comma-joined or repeated; matches items with any of the categories",
    ),
    industry: Optional[str] = Query(None, description="Case-insensitive industry substring"),
    is_breakthrough: Optional[str] = Query(None, alias="isBreakthrough"),
    limit: int = Query(settings.default_page_size, ge=0),
    offset: int = Query(0, ge=0),
) -> NewsFilters:
    return NewsFilters(
        company=clean_value(company),
        implementation_type=clean_value(implementation_type),
        relevance_categories=split_multi_value(relevance_categories),
        industry=clean_value(industry),
        is_breakthrough=parse_bool_flag(is_breakthrough),
        limit=limit,
        offset=offset,
    )


def pm_resource_filters(
    resource_type: Optional[str] = Query(None, alias="resourceType"),
    pm_stage: Optional[str] = Query(None, alias="pmStage"),
    company: Optional[str] = Query(None, description="Case-insensitive company substring"),
    difficulty: Optional[str] = Query(None),
    tags: Optional[List[str]] = Query(
        None, description="Comma-joined or repeated; matches resources with any of the tags"
    ),
    limit: int = Query(settings.default_page_size, ge=0),
    offset: int = Query(0, ge=0),
) -> PmResourceFilters:
    return PmResourceFilters(
        resource_type=clean_value(resource_type),
        pm_stage=clean_value(pm_stage),
        company=clean_value(company),
        difficulty=clean_value(difficulty),
        tags=split_multi_value(tags),
        limit=limit,
        offset=offset,
    )
