"""
Pydantic models for AI news items.

``NewsItemBase`` holds the fields shared by every representation.
``NewsItemCreate`` is the request body for new items (the server
assigns ``id`` and ``createdAt``; ``publishedAt`` defaults to the
current time), ``NewsItemUpdate`` carries a partial update and
``NewsItemRead`` is what the API returns.

``implementationType`` is free text.  The client uses Released,
Research, Beta and Pilot but nothing enforces that set.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel, PartialUpdateModel, ensure_utc


class NewsItemBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["OpenAI Announces GPT-5"])
    description: str = Field(..., min_length=1)
    content: Optional[str] = None
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    company: str = Field(..., min_length=1, examples=["OpenAI"])
    implementation_type: str = Field(..., min_length=1, examples=["Released"])
    relevance_categories: List[str] = Field(..., examples=[["Coding", "Education"]])
    industry: str = Field(..., min_length=1, examples=["Technology"])
    technology: str = Field(..., min_length=1, examples=["Large Language Models"])
    gravity_score: int = Field(0, description="Breakthrough ranking signal; sort tie-breaker")
    is_breakthrough: bool = False


class NewsItemCreate(NewsItemBase):
    """Schema for creating a news item."""

    published_at: Optional[datetime] = None

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


class NewsItemUpdate(PartialUpdateModel):
    """Schema for updating a news item.

    All fields are optional; only provided fields will be updated.
    """

    non_nullable = frozenset(
        {
            "title",
            "description",
            "company",
            "implementation_type",
            "relevance_categories",
            "industry",
            "technology",
            "gravity_score",
            "is_breakthrough",
            "published_at",
        }
    )

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    image_url: Optional[str] = None
    source_url: Optional[str] = None
    company: Optional[str] = Field(None, min_length=1)
    implementation_type: Optional[str] = Field(None, min_length=1)
    relevance_categories: Optional[List[str]] = None
    industry: Optional[str] = Field(None, min_length=1)
    technology: Optional[str] = Field(None, min_length=1)
    gravity_score: Optional[int] = None
    is_breakthrough: Optional[bool] = None
    published_at: Optional[datetime] = None

    @field_validator("published_at")
    @classmethod
    def published_at_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)


class NewsItemRead(NewsItemBase):
    """Schema for reading a news item from the API."""

    id: str
    published_at: datetime
    created_at: datetime
