"""Domain value types for IceBreaker."""

from enum import Enum


class QuestionSortField(str, Enum):
    """Fields a question listing can be ordered by."""

    TITLE = "title"
    CREATED_AT = "created_at"
    LIKE_COUNT = "like_count"
    VIEW_COUNT = "view_count"

    @classmethod
    def parse(cls, value: str | None) -> "QuestionSortField":
        """Parse a sort key given in camel, snake or lower case.

        Unknown or missing keys fall back to CREATED_AT.

        Examples: 'likeCount', 'like_count', 'LIKECOUNT' -> LIKE_COUNT
        """
        if not value:
            return cls.CREATED_AT
        normalized = value.replace("_", "").lower()
        for field in cls:
            if field.value.replace("_", "") == normalized:
                return field
        return cls.CREATED_AT


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """Parse a sort direction. Anything other than 'asc' means descending."""
        if value and value.strip().lower() == "asc":
            return cls.ASC
        return cls.DESC
