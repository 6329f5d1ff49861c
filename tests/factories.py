from datetime import datetime, timedelta, timezone

from pm_news_api.app.schemas.news import NewsItemCreate
from pm_news_api.app.schemas.pm_resource import PmResourceCreate


def make_news_item(**overrides) -> NewsItemCreate:
    fields = {
        "title": "Model release",
        "description": "A new model ships",
        "company": "Acme AI",
        "implementation_type": "Released",
        "relevance_categories": ["Coding"],
        "industry": "Technology",
        "technology": "Large Language Models",
        "gravity_score": 50,
        "is_breakthrough": False,
        "published_at": datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return NewsItemCreate(**fields)


def make_pm_resource(**overrides) -> PmResourceCreate:
    fields = {
        "title": "Roadmap template",
        "description": "Plan the next quarter",
        "resource_type": "Template",
        "pm_stage": "Planning",
        "tags": ["Roadmap"],
        "difficulty": "Beginner",
    }
    fields.update(overrides)
    return PmResourceCreate(**fields)


def hours_ago(hours: int) -> datetime:
    return datetime.now(timezone.utc) - timedelta(hours=hours)
