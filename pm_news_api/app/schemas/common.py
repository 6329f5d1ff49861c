"""
Shared building blocks for the API schemas.
"""

from datetime import datetime, timezone
from typing import ClassVar, FrozenSet, Optional

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    """Return the current time as a timezone‑aware UTC datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Interpret naive datetimes as UTC so all stored timestamps compare."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class CamelModel(BaseModel):
    """Base model serialised with camelCase keys.

    Request bodies may use either the camelCase alias or the Python
    attribute name.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class PartialUpdateModel(CamelModel):
    """Base for partial update payloads.

    Every field is optional so clients send only what changes.  Fields
    listed in ``non_nullable`` hold required values on the stored
    record, so an explicit ``null`` for them is rejected instead of
    being merged.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required_fields(self):
        for name in self.model_fields_set:
            if name in self.non_nullable and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self
