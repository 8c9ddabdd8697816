"""Topic domain service."""

from typing import Optional

import logfire

from icebreaker.domain.error import ConflictError, NotFoundError, ValidationError
from icebreaker.domain.model import Topic
from icebreaker.domain.repository import TopicRepository
from icebreaker.domain.value import PagedResult, TopicId, check_page

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def get_by_id(self, topic_id: TopicId) -> Topic:
        """Get topic by ID.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("topic_service.get_by_id", topic_id=str(topic_id)):
            topic = await self.topic_repository.find_by_id(topic_id)
            if not topic:
                logfire.warn("Topic not found", topic_id=str(topic_id))
                raise NotFoundError("Topic", str(topic_id))
            return topic

    async def list_topics(
        self,
        page_number: int = 1,
        page_size: int = 10,
        search: Optional[str] = None,
    ) -> PagedResult[Topic]:
        """List topics ordered by name.

        Unlike question listing, out-of-range paging input is rejected.

        Raises:
            ValidationError: If page_number < 1 or page_size is not in [1, 100]
        """
        check_page(page_number, page_size)
        with logfire.span(
            "topic_service.list_topics",
            page_number=page_number,
            page_size=page_size,
            search=search,
        ):
            return await self.topic_repository.find_page(
                page_number, page_size, search
            )

    async def get_all_topics(self) -> list[Topic]:
        """Get every topic ordered by name."""
        with logfire.span("topic_service.get_all_topics"):
            return await self.topic_repository.find_all()

    async def create_topic(self, name: str, description: Optional[str] = None) -> Topic:
        """Create a topic with a trimmed, unique name.

        Raises:
            ValidationError: If name is blank
            ConflictError: If a topic with the same name (case-insensitive) exists
        """
        with logfire.span("topic_service.create_topic", name=name):
            topic = Topic.create(name=name, description=description)

            if await self.topic_repository.exists_by_name(topic.name):
                logfire.warn("Topic name already taken", name=topic.name)
                raise ConflictError("Topic", "name", topic.name)

            created = await self.topic_repository.add(topic)
            logfire.info("Topic created", topic_id=str(created.id), name=created.name)
            return created

    async def update_topic(
        self,
        topic_id: TopicId,
        name: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Topic:
        """Rename and/or redescribe a topic.

        Args:
            topic_id: Topic to update
            name: New name; must not be blank when supplied
            description: New description; blank clears it, None leaves it

        Returns:
            Updated topic

        Raises:
            ValidationError: If a blank name is supplied
            NotFoundError: If topic not found
            ConflictError: If another topic already has the new name
        """
        with logfire.span("topic_service.update_topic", topic_id=str(topic_id)):
            if name is not None and not name.strip():
                raise ValidationError("Topic name cannot be empty")

            topic = await self.get_by_id(topic_id)

            if name is not None and name.strip() != topic.name:
                existing = await self.topic_repository.find_by_name(name.strip())
                if existing and existing.id != topic_id:
                    logfire.warn("Topic name already taken", name=name.strip())
                    raise ConflictError("Topic", "name", name.strip())

            updated = topic.update(name=name, description=description)
            return await self.topic_repository.update(updated)

    async def delete_topic(self, topic_id: TopicId) -> None:
        """Remove a topic from storage.

        Questions under the topic are left in place.

        Raises:
            NotFoundError: If topic not found
        """
        with logfire.span("topic_service.delete_topic", topic_id=str(topic_id)):
            await self.get_by_id(topic_id)
            await self.topic_repository.delete(topic_id)
            logfire.info("Topic deleted", topic_id=str(topic_id))

    async def exists_by_name(self, name: str) -> bool:
        return await self.topic_repository.exists_by_name(name)
