"""
Filter structures for listing news items and PM resources, and the
shape of the filter options returned by ``GET /api/filters``.

Filtering combines fields with AND; inside a multi‑valued field
(``relevance_categories``, ``tags``) a record matches when it carries
ANY of the requested values.  ``limit``/``offset`` paginate the
filtered, sorted result; a missing ``limit`` means "everything after
``offset``".
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .common import CamelModel


class NewsFilters(BaseModel):
    """Optional filters for ``MemStorage.list_news_items``."""

    company: Optional[str] = Field(None, description="Case-insensitive substring of the company")
    implementation_type: Optional[str] = Field(None, description="Exact implementation type")
    relevance_categories: Optional[List[str]] = Field(
        None, description="Item matches if it has any of these categories"
    )
    industry: Optional[str] = Field(None, description="Case-insensitive substring of the industry")
    is_breakthrough: Optional[bool] = None
    limit: Optional[int] = Field(None, ge=0)
    offset: int = Field(0, ge=0)


class PmResourceFilters(BaseModel):
    """Optional filters for ``MemStorage.list_pm_resources``."""

    resource_type: Optional[str] = None
    pm_stage: Optional[str] = None
    company: Optional[str] = Field(None, description="Case-insensitive substring of the company")
    difficulty: Optional[str] = None
    tags: Optional[List[str]] = Field(None, description="Resource matches if it has any of these tags")
    limit: Optional[int] = Field(None, ge=0)
    offset: int = Field(0, ge=0)


class NewsFilterOptions(CamelModel):
    companies: List[str]
    implementation_types: List[str]
    relevance_categories: List[str]
    industries: List[str]
    technologies: List[str]


class PmResourceFilterOptions(CamelModel):
    resource_types: List[str]
    pm_stages: List[str]
    difficulties: List[str]
    tags: List[str]


class FilterOptions(CamelModel):
    """Distinct values of every filterable field, used to fill pickers."""

    news: NewsFilterOptions
    pm_resources: PmResourceFilterOptions
