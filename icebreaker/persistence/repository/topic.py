"""Topic repository over an entity store."""

from typing import Optional, Sequence

from icebreaker.domain.model.topic import Topic
from icebreaker.domain.repository.topic import TopicRepository
from icebreaker.domain.value import PagedResult, TopicId, paginate
from icebreaker.persistence.repository.base import StoreRepository, matches, same_text


class StoreTopicRepository(StoreRepository[Topic], TopicRepository):
    """Store-backed implementation of TopicRepository."""

    resource = "Topic"

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        return await self._find_by_id(topic_id)

    async def find_by_ids(self, topic_ids: Sequence[TopicId]) -> list[Topic]:
        return await self._find_by_ids(topic_ids)

    async def find_by_name(self, name: str) -> Optional[Topic]:
        for topic in await self._active():
            if same_text(topic.name, name):
                return topic
        return None

    async def exists_by_name(self, name: str) -> bool:
        return await self.find_by_name(name) is not None

    async def find_all(self) -> list[Topic]:
        topics = await self._active()
        topics.sort(key=lambda t: t.name.casefold())
        return topics

    async def find_page(
        self, page_number: int, page_size: int, search: Optional[str] = None
    ) -> PagedResult[Topic]:
        topics = await self.find_all()

        if search:
            topics = [
                t
                for t in topics
                if matches(t.name, search) or matches(t.description, search)
            ]

        return paginate(topics, page_number, page_size)

    async def add(self, topic: Topic) -> Topic:
        return await self._add(topic)

    async def update(self, topic: Topic) -> Topic:
        return await self._update(topic)

    async def delete(self, topic_id: TopicId) -> bool:
        return await self._hard_delete(lambda t: t.id == topic_id)
