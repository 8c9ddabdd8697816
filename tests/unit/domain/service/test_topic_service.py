"""Unit tests for TopicService."""

from uuid import uuid4

import pytest

from icebreaker.domain.error import ConflictError, NotFoundError, ValidationError
from icebreaker.domain.repository import TopicRepository
from icebreaker.domain.service import TopicService
from icebreaker.domain.value import TopicId
from tests.conftest import make_topic
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTopic:
    """Tests for create_topic."""

    @pytest.mark.asyncio
    async def test_create_topic_trims_name(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)

        # Act
        topic = await topic_service.create_topic("  Biology  ", "Living things")

        # Assert
        assert topic.name == "Biology"
        assert topic.description == "Living things"
        assert await topic_service.exists_by_name("biology") is True

    @pytest.mark.asyncio
    async def test_create_topic_rejects_duplicate_name(self, unit_env):
        """Topic names are unique regardless of case."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic("Biology")

        # Act & Assert
        with pytest.raises(ConflictError, match="Topic with name"):
            await topic_service.create_topic("BIOLOGY")


class TestUpdateTopic:
    """Tests for update_topic."""

    @pytest.mark.asyncio
    async def test_rename_to_other_topics_name_conflicts(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic("Biology")
        chemistry = await topic_service.create_topic("Chemistry")

        # Act & Assert
        with pytest.raises(ConflictError):
            await topic_service.update_topic(chemistry.id, name="biology")

    @pytest.mark.asyncio
    async def test_rename_changing_only_case_is_allowed(self, unit_env):
        """A topic may be renamed to a different casing of its own name."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        topic = await topic_service.create_topic("biology")

        # Act
        updated = await topic_service.update_topic(topic.id, name="Biology")

        # Assert
        assert updated.name == "Biology"

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)
        topic = await topic_service.create_topic("Biology")

        # Act & Assert
        with pytest.raises(ValidationError, match="cannot be empty"):
            await topic_service.update_topic(topic.id, name="   ")

    @pytest.mark.asyncio
    async def test_update_missing_topic_raises(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await topic_service.update_topic(TopicId(uuid4()), description="x")


class TestListAndDelete:
    """Tests for listing and deleting topics."""

    @pytest.mark.asyncio
    async def test_list_topics_ordered_by_name(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)
        topic_repo = await unit_env.get(TopicRepository)
        for name in ["physics", "Astronomy", "chemistry"]:
            await topic_repo.add(make_topic(name))

        # Act
        page = await topic_service.list_topics(page_number=1, page_size=2)
        everything = await topic_service.get_all_topics()

        # Assert
        assert [t.name for t in page.items] == ["Astronomy", "chemistry"]
        assert page.total_count == 3
        assert [t.name for t in everything] == ["Astronomy", "chemistry", "physics"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page_number, page_size", [(0, 10), (1, 0), (1, 101)])
    async def test_list_topics_rejects_invalid_paging(
        self, unit_env, page_number, page_size
    ):
        """Topic listing rejects out-of-range paging instead of clamping it."""
        # Arrange
        topic_service = await unit_env.get(TopicService)

        # Act & Assert
        with pytest.raises(ValidationError):
            await topic_service.list_topics(page_number, page_size)

    @pytest.mark.asyncio
    async def test_delete_removes_topic(self, unit_env):
        """Deleted topics are removed from storage entirely."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        topic_repo = await unit_env.get(TopicRepository)
        topic = await topic_service.create_topic("Biology")

        # Act
        await topic_service.delete_topic(topic.id)

        # Assert
        assert await topic_repo.store.read_all() == []

    @pytest.mark.asyncio
    async def test_delete_missing_topic_raises(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Topic not found"):
            await topic_service.delete_topic(TopicId(uuid4()))
