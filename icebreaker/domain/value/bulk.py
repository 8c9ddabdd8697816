"""Results of bulk operations that tolerate per-item failures."""

from typing import Generic, TypeVar

from pydantic import Field, computed_field

from icebreaker.domain.value.common import ValueObject

T = TypeVar("T")


class BulkError(ValueObject):
    """Failure of one input item, by its position in the input."""

    index: int = Field(ge=0)
    message: str


class BulkResult(ValueObject, Generic[T]):
    """Successes in input order plus one error per failed input."""

    successes: list[T] = Field(default_factory=list)
    errors: list[BulkError] = Field(default_factory=list)

    @computed_field
    @property
    def total_processed(self) -> int:
        return len(self.successes) + len(self.errors)

    @computed_field
    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
