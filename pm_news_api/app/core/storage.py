"""
In‑memory data store.

``MemStorage`` owns the three collections of the application (users,
news items and PM resources), each a dictionary keyed by a generated
UUID string.  The store lives for the lifetime of the process: it is
built once by ``create_app``, optionally seeded with fixture content,
kept on ``app.state.storage`` and handed to route handlers through the
``get_storage`` dependency.

Listing works like a tiny query engine: a sequence of independent
predicate passes (AND across fields, ANY within a multi‑valued field),
a stable descending sort and an offset/limit slice.  Nothing here
awaits, so every operation is atomic with respect to other requests
served by the same event loop.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, TypeVar

from fastapi import Request

from ..schemas.common import utcnow
from ..schemas.filters import NewsFilters, PmResourceFilters
from ..schemas.news import NewsItemCreate, NewsItemRead, NewsItemUpdate
from ..schemas.pm_resource import PmResourceCreate, PmResourceRead, PmResourceUpdate
from ..schemas.user import UserCreate, UserRead
from .seed import seed_news_items, seed_pm_resources

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _contains_ci(value: Optional[str], needle: str) -> bool:
    """Case‑insensitive substring test; a missing value never matches."""
    return value is not None and needle.lower() in value.lower()


def _has_any(values: Iterable[str], wanted: Sequence[str]) -> bool:
    present = set(values)
    return any(item in present for item in wanted)


def _paginate(records: List[T], offset: int = 0, limit: Optional[int] = None) -> List[T]:
    if limit is None:
        return records[offset:]
    return records[offset:offset + limit]


class MemStorage:
    """Store object holding users, news items and PM resources."""

    def __init__(self, seed: bool = False) -> None:
        self.users: Dict[str, UserRead] = {}
        self.news_items: Dict[str, NewsItemRead] = {}
        self.pm_resources: Dict[str, PmResourceRead] = {}
        if seed:
            self.seed()

    def seed(self) -> None:
        """Load the fixture news items and PM resources."""
        now = utcnow()
        for item in seed_news_items(now):
            self._insert_news_item(item, created_at=item.published_at)
        for resource in seed_pm_resources():
            self._insert_pm_resource(resource, created_at=now)
        logger.info(
            "Seeded store with %d news items and %d PM resources",
            len(self.news_items),
            len(self.pm_resources),
        )

    @staticmethod
    def _new_id() -> str:
        return str(uuid.uuid4())

    # ------------------------------------------------------------------
    # Users

    async def get_user(self, user_id: str) -> Optional[UserRead]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[UserRead]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, data: UserCreate) -> UserRead:
        user = UserRead(id=self._new_id(), **data.model_dump())
        self.users[user.id] = user
        logger.info("Created user %s", user.id)
        return user

    # ------------------------------------------------------------------
    # News items

    def _insert_news_item(
        self, data: NewsItemCreate, created_at: Optional[datetime] = None
    ) -> NewsItemRead:
        now = utcnow()
        fields = data.model_dump()
        fields["published_at"] = data.published_at or now
        item = NewsItemRead(id=self._new_id(), created_at=created_at or now, **fields)
        self.news_items[item.id] = item
        return item

    async def list_news_items(self, filters: Optional[NewsFilters] = None) -> List[NewsItemRead]:
        """Return news items matching ``filters``, newest first.

        Items are ordered by ``published_at`` descending; items published
        at the same instant are ordered by ``gravity_score`` descending.
        """
        filters = filters or NewsFilters()
        items = list(self.news_items.values())

        if filters.company:
            items = [i for i in items if _contains_ci(i.company, filters.company)]
        if filters.implementation_type:
            items = [i for i in items if i.implementation_type == filters.implementation_type]
        if filters.industry:
            items = [i for i in items if _contains_ci(i.industry, filters.industry)]
        if filters.is_breakthrough is not None:
            items = [i for i in items if i.is_breakthrough == filters.is_breakthrough]
        if filters.relevance_categories:
            items = [i for i in items if _has_any(i.relevance_categories, filters.relevance_categories)]

        items.sort(key=lambda i: (i.published_at, i.gravity_score), reverse=True)
        return _paginate(items, filters.offset, filters.limit)

    async def get_news_item(self, item_id: str) -> Optional[NewsItemRead]:
        return self.news_items.get(item_id)

    async def create_news_item(self, data: NewsItemCreate) -> NewsItemRead:
        """Insert a news item; ``published_at`` defaults to now."""
        item = self._insert_news_item(data)
        logger.info("Created news item %s (%s)", item.id, item.company)
        return item

    async def update_news_item(self, item_id: str, data: NewsItemUpdate) -> Optional[NewsItemRead]:
        """Merge the supplied fields into an existing news item.

        Returns the updated item or ``None`` if no item has ``item_id``.
        """
        current = self.news_items.get(item_id)
        if current is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        updated = current.model_copy(update=changes)
        self.news_items[item_id] = updated
        logger.info("Updated news item %s: %s", item_id, sorted(changes))
        return updated

    async def delete_news_item(self, item_id: str) -> bool:
        removed = self.news_items.pop(item_id, None)
        if removed is not None:
            logger.info("Deleted news item %s", item_id)
        return removed is not None

    # ------------------------------------------------------------------
    # PM resources

    def _insert_pm_resource(
        self, data: PmResourceCreate, created_at: Optional[datetime] = None
    ) -> PmResourceRead:
        resource = PmResourceRead(
            id=self._new_id(), created_at=created_at or utcnow(), **data.model_dump()
        )
        self.pm_resources[resource.id] = resource
        return resource

    async def list_pm_resources(
        self, filters: Optional[PmResourceFilters] = None
    ) -> List[PmResourceRead]:
        """Return PM resources matching ``filters``, most recently created first."""
        filters = filters or PmResourceFilters()
        resources = list(self.pm_resources.values())

        if filters.resource_type:
            resources = [r for r in resources if r.resource_type == filters.resource_type]
        if filters.pm_stage:
            resources = [r for r in resources if r.pm_stage == filters.pm_stage]
        if filters.company:
            resources = [r for r in resources if _contains_ci(r.company, filters.company)]
        if filters.difficulty:
            resources = [r for r in resources if r.difficulty == filters.difficulty]
        if filters.tags:
            resources = [r for r in resources if _has_any(r.tags, filters.tags)]

        resources.sort(key=lambda r: r.created_at, reverse=True)
        return _paginate(resources, filters.offset, filters.limit)

    async def get_pm_resource(self, resource_id: str) -> Optional[PmResourceRead]:
        return self.pm_resources.get(resource_id)

    async def create_pm_resource(self, data: PmResourceCreate) -> PmResourceRead:
        resource = self._insert_pm_resource(data)
        logger.info("Created PM resource %s (%s)", resource.id, resource.resource_type)
        return resource

    async def update_pm_resource(
        self, resource_id: str, data: PmResourceUpdate
    ) -> Optional[PmResourceRead]:
        """Merge the supplied fields into an existing PM resource.

        Returns the updated resource or ``None`` if it does not exist.
        """
        current = self.pm_resources.get(resource_id)
        if current is None:
            return None
        changes = data.model_dump(exclude_unset=True)
        updated = current.model_copy(update=changes)
        self.pm_resources[resource_id] = updated
        logger.info("Updated PM resource %s: %s", resource_id, sorted(changes))
        return updated

    async def delete_pm_resource(self, resource_id: str) -> bool:
        removed = self.pm_resources.pop(resource_id, None)
        if removed is not None:
            logger.info("Deleted PM resource %s", resource_id)
        return removed is not None


def get_storage(request: Request) -> MemStorage:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.storage
