"""
Pydantic schemas for PM resources.

A PM resource is a template, framework, teardown, interview question
set or similar material for product managers.  ``resourceType``,
``pmStage`` and ``difficulty`` are open strings; the client groups
them into known values (e.g. pmStage is one of Discovery, Planning,
Execution, Launch, Growth, Optimization) but the API accepts any
non‑empty label.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .common import CamelModel, PartialUpdateModel


class PmResourceBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["AI Product Planning Template"])
    description: str = Field(..., min_length=1)
    content: Optional[str] = None
    resource_type: str = Field(..., min_length=1, examples=["Template"])
    pm_stage: str = Field(..., min_length=1, examples=["Planning"])
    # Mostly set for interview question sets and teardowns.
    company: Optional[str] = None
    tags: List[str] = Field(..., examples=[["Product Planning", "Metrics"]])
    difficulty: str = Field(..., min_length=1, examples=["Beginner"])
    resource_url: Optional[str] = None
    download_url: Optional[str] = None


class PmResourceCreate(PmResourceBase):
    """Schema for creating a PM resource."""
    pass


class PmResourceUpdate(PartialUpdateModel):
    """Schema for updating a PM resource.

    All fields are optional; only provided fields will be updated.
    """

    non_nullable = frozenset(
        {"title", "description", "resource_type", "pm_stage", "tags", "difficulty"}
    )

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = None
    resource_type: Optional[str] = Field(None, min_length=1)
    pm_stage: Optional[str] = Field(None, min_length=1)
    company: Optional[str] = None
    tags: Optional[List[str]] = None
    difficulty: Optional[str] = Field(None, min_length=1)
    resource_url: Optional[str] = None
    download_url: Optional[str] = None


class PmResourceRead(PmResourceBase):
    """Schema for reading a PM resource from the API."""

    id: str
    created_at: datetime
