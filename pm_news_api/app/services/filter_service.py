"""
Filter options for the client's pickers.

``FilterService.get_filter_options`` scans the full, unfiltered
collections on every call and returns the distinct values of each
filterable field.  Values keep the order in which they are first
seen while walking the store; nothing is cached, so newly created or
deleted records show up immediately.
"""

from typing import Iterable, List

from ..core.storage import MemStorage
from ..schemas.filters import FilterOptions, NewsFilterOptions, PmResourceFilterOptions


def _distinct(values: Iterable[str]) -> List[str]:
    seen = set()
    result: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class FilterService:
    """Aggregates distinct filter values across the store."""

    @classmethod
    async def get_filter_options(cls, storage: MemStorage) -> FilterOptions:
        news = await storage.list_news_items()
        resources = await storage.list_pm_resources()

        return FilterOptions(
            news=NewsFilterOptions(
                companies=_distinct(item.company for item in news),
                implementation_types=_distinct(item.implementation_type for item in news),
                relevance_categories=_distinct(
                    category for item in news for category in item.relevance_categories
                ),
                industries=_distinct(item.industry for item in news),
                technologies=_distinct(item.technology for item in news),
            ),
            pm_resources=PmResourceFilterOptions(
                resource_types=_distinct(r.resource_type for r in resources),
                pm_stages=_distinct(r.pm_stage for r in resources),
                difficulties=_distinct(r.difficulty for r in resources),
                tags=_distinct(tag for r in resources for tag in r.tags),
            ),
        )
