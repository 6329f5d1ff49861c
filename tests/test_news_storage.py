"""
Tests for news item storage: CRUD, filtering, ordering and pagination.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pm_news_api.app.schemas.filters import NewsFilters
from pm_news_api.app.schemas.news import NewsItemUpdate
from tests.factories import hours_ago, make_news_item

pytestmark = pytest.mark.asyncio

BASE = datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


async def _populate(storage):
    rows = [
        dict(title="a", company="OpenAI", implementation_type="Released", industry="Technology",
             relevance_categories=["Coding", "Education"], is_breakthrough=True, published_at=BASE),
        dict(title="b", company="Google DeepMind", implementation_type="Research", industry="Biotechnology",
             relevance_categories=["Healthcare"], is_breakthrough=False, published_at=BASE - timedelta(hours=1)),
        dict(title="c", company="openai labs", implementation_type="Beta", industry="FinTech",
             relevance_categories=["Finance", "Coding"], is_breakthrough=False,
             published_at=BASE - timedelta(hours=2)),
        dict(title="d", company="Anthropic", implementation_type="Released", industry="technology services",
             relevance_categories=["Safety"], is_breakthrough=True, published_at=BASE - timedelta(hours=3)),
    ]
    for row in rows:
        await storage.create_news_item(make_news_item(**row))


async def _titles(storage, **filters):
    return [item.title for item in await storage.list_news_items(NewsFilters(**filters))]


async def test_seeded_items_list_newest_first(seeded_storage):
    items = await seeded_storage.list_news_items()

    assert len(items) == 6
    assert items[0].gravity_score == 95
    assert items[1].gravity_score == 88
    for earlier, later in zip(items, items[1:]):
        assert earlier.published_at >= later.published_at


async def test_seeded_news_created_at_matches_published_at(seeded_storage):
    for item in await seeded_storage.list_news_items():
        assert item.created_at == item.published_at


async def test_same_published_at_orders_by_gravity(storage):
    await storage.create_news_item(make_news_item(title="low", gravity_score=10, published_at=BASE))
    await storage.create_news_item(make_news_item(title="high", gravity_score=90, published_at=BASE))
    await storage.create_news_item(make_news_item(title="newer", gravity_score=1, published_at=BASE + timedelta(seconds=1)))

    assert await _titles(storage) == ["newer", "high", "low"]


async def test_company_filter_is_case_insensitive_substring(storage):
    await _populate(storage)
    assert await _titles(storage, company="OPENAI") == ["a", "c"]
    assert await _titles(storage, company="mind") == ["b"]


async def test_implementation_type_filter_is_exact(storage):
    await _populate(storage)
    assert await _titles(storage, implementation_type="Released") == ["a", "d"]
    assert await _titles(storage, implementation_type="released") == []


async def test_industry_filter_is_case_insensitive_substring(storage):
    await _populate(storage)
    assert await _titles(storage, industry="TECHNOLOGY") == ["a", "b", "d"]


async def test_breakthrough_filter(storage):
    await _populate(storage)
    assert await _titles(storage, is_breakthrough=True) == ["a", "d"]
    assert await _titles(storage, is_breakthrough=False) == ["b", "c"]


async def test_relevance_categories_match_any(storage):
    await _populate(storage)
    assert await _titles(storage, relevance_categories=["Finance", "Safety"]) == ["c", "d"]
    assert await _titles(storage, relevance_categories=["Coding"]) == ["a", "c"]
    assert await _titles(storage, relevance_categories=["Robotics"]) == []


async def test_empty_category_list_does_not_filter(storage):
    await _populate(storage)
    assert await _titles(storage, relevance_categories=[]) == ["a", "b", "c", "d"]


async def test_filters_combine_with_and(storage):
    await _populate(storage)
    assert await _titles(storage, company="openai", relevance_categories=["Coding"], is_breakthrough=False) == ["c"]
    assert await _titles(storage, company="Anthropic", implementation_type="Research") == []


async def test_pagination_slices_sorted_result(storage):
    await _populate(storage)
    assert await _titles(storage, offset=1, limit=2) == ["b", "c"]
    assert await _titles(storage, offset=3, limit=10) == ["d"]
    assert await _titles(storage, offset=10) == []
    assert await _titles(storage, limit=0) == []


async def test_missing_limit_returns_remaining_items(storage):
    await _populate(storage)
    assert await _titles(storage, offset=2) == ["c", "d"]


async def test_create_then_get_round_trip(storage):
    data = make_news_item(content="Long form", image_url="https://img", source_url="https://src")
    created = await storage.create_news_item(data)

    fetched = await storage.get_news_item(created.id)
    assert fetched == created
    assert fetched.model_dump(exclude={"id", "created_at"}) == data.model_dump()
    assert fetched.created_at is not None


async def test_create_defaults_published_at_to_now(storage):
    before = datetime.now(timezone.utc)
    created = await storage.create_news_item(make_news_item(published_at=None))
    after = datetime.now(timezone.utc)

    assert before <= created.published_at <= after
    assert before <= created.created_at <= after


async def test_ids_are_unique(storage):
    first = await storage.create_news_item(make_news_item())
    second = await storage.create_news_item(make_news_item())
    assert first.id != second.id


async def test_naive_published_at_is_treated_as_utc(storage):
    await storage.create_news_item(make_news_item(title="aware", published_at=hours_ago(3)))
    naive = (datetime.now(timezone.utc) - timedelta(hours=1)).replace(tzinfo=None)
    created = await storage.create_news_item(make_news_item(title="naive", published_at=naive))

    assert created.published_at.tzinfo is not None
    assert await _titles(storage) == ["naive", "aware"]


async def test_update_changes_only_supplied_fields(storage):
    created = await storage.create_news_item(make_news_item(content="Body"))

    updated = await storage.update_news_item(created.id, NewsItemUpdate(title="X"))

    assert updated.title == "X"
    assert updated.model_dump(exclude={"title"}) == created.model_dump(exclude={"title"})
    assert (await storage.get_news_item(created.id)).title == "X"


async def test_update_can_clear_optional_field(storage):
    created = await storage.create_news_item(make_news_item(content="Body"))
    updated = await storage.update_news_item(created.id, NewsItemUpdate(content=None))
    assert updated.content is None
    assert updated.title == created.title


async def test_update_unknown_id_returns_none(storage):
    assert await storage.update_news_item("missing", NewsItemUpdate(title="X")) is None


async def test_delete_removes_item(storage):
    created = await storage.create_news_item(make_news_item())

    assert await storage.delete_news_item(created.id) is True
    assert await storage.get_news_item(created.id) is None
    assert await storage.delete_news_item(created.id) is False


async def test_get_unknown_id_returns_none(storage):
    assert await storage.get_news_item("does-not-exist") is None
