"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from icebreaker.domain.model.topic import Topic
from icebreaker.domain.value import PagedResult, TopicId


class TopicRepository(ABC):
    """Repository for Topic entity.

    Topics are hard-deleted, so every stored topic is visible.
    """

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        pass

    @abstractmethod
    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        """Find topics by IDs (batch query). Unknown IDs are omitted."""
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Topic]:
        """Find a topic by name (case-insensitive)."""
        pass

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        pass

    @abstractmethod
    async def find_all(self) -> list[Topic]:
        """Find all topics ordered by name."""
        pass

    @abstractmethod
    async def find_page(
        self, page_number: int, page_size: int, search: Optional[str] = None
    ) -> PagedResult[Topic]:
        """Find a page of topics ordered by name.

        Args:
            page_number: 1-based page number
            page_size: Topics per page
            search: Case-insensitive substring of name or description

        Returns:
            Page of topics with the filtered total count
        """
        pass

    @abstractmethod
    async def add(self, topic: Topic) -> Topic:
        pass

    @abstractmethod
    async def update(self, topic: Topic) -> Topic:
        """Replace the stored topic with the same ID.

        Raises:
            NotFoundError: If no topic with this ID is stored
        """
        pass

    @abstractmethod
    async def delete(self, topic_id: TopicId) -> bool:
        """Remove a topic from storage.

        Returns:
            True if a topic was removed, False if none existed
        """
        pass
