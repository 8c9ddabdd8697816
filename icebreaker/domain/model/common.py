"""Base models for all domain entities."""

from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from icebreaker.domain.error import ValidationError


def utcnow() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and serialization.
    Fields are exposed under camelCase aliases for the stored JSON form
    and can be populated by either name.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Entity(DomainModel):
    """Field set shared by every stored entity.

    `is_active` is the soft-delete flag: inactive records are kept in
    storage but never returned by lookups.
    """

    id: UUID = Field(default_factory=uuid4)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    is_active: bool = True

    def _touch(self, **changes):
        """Return a copy with `changes` applied and `updated_at` bumped."""
        return self.model_copy(update={**changes, "updated_at": utcnow()})


def require_text(value: Optional[str], field: str) -> str:
    """Return `value` stripped, or raise if it is missing or blank."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip()


def require_id(value: Optional[UUID], field: str) -> UUID:
    """Return `value`, or raise if it is missing or the nil UUID."""
    if value is None or value.int == 0:
        raise ValidationError(f"{field} cannot be empty")
    return value


def non_blank(value: Optional[str]) -> Optional[str]:
    """Return `value` stripped, or None when it is missing or blank."""
    if value is None or not value.strip():
        return None
    return value.strip()
