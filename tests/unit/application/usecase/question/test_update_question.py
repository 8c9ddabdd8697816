"""Unit tests for UpdateQuestionUseCase and DeleteQuestionUseCase."""

from uuid import uuid4

import pytest

from icebreaker.application.usecase.question import (
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)
from icebreaker.domain.error import NotFoundError
from icebreaker.domain.repository import QuestionRepository, TopicRepository
from tests.conftest import make_question, make_topic
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateQuestionUseCase:
    """Tests for UpdateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_moves_question_to_other_topic(self, unit_env):
        # Arrange
        topic_repo = await unit_env.get(TopicRepository)
        question_repo = await unit_env.get(QuestionRepository)
        optics = await topic_repo.add(make_topic("Optics"))
        question = await question_repo.add(make_question(topic_id=optics.id))
        mechanics = await topic_repo.add(make_topic("Mechanics"))
        use_case = await unit_env.get(UpdateQuestionUseCase)

        # Act
        result = await use_case.execute(
            UpdateQuestionRequest(
                question_id=str(question.id), topic_id=str(mechanics.id), title=" "
            )
        )

        # Assert
        assert result.topic_id == str(mechanics.id)
        assert result.topic_name == "Mechanics"
        assert result.title == question.title

    @pytest.mark.asyncio
    async def test_unknown_topic_raises_without_saving(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.add(make_question())
        use_case = await unit_env.get(UpdateQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Topic not found"):
            await use_case.execute(
                UpdateQuestionRequest(
                    question_id=str(question.id),
                    title="New title",
                    topic_id=str(uuid4()),
                )
            )
        assert (await question_repo.find_by_id(question.id)).title == question.title

    @pytest.mark.asyncio
    async def test_missing_question_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await use_case.execute(
                UpdateQuestionRequest(question_id=str(uuid4()), title="New title")
            )


class TestDeleteQuestionUseCase:
    """Tests for DeleteQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_delete_hides_question(self, unit_env):
        # Arrange
        question_repo = await unit_env.get(QuestionRepository)
        question = await question_repo.add(make_question())
        use_case = await unit_env.get(DeleteQuestionUseCase)

        # Act
        await use_case.execute(DeleteQuestionRequest(question_id=str(question.id)))

        # Assert
        assert await question_repo.find_by_id(question.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing_question_raises(self, unit_env):
        # Arrange
        use_case = await unit_env.get(DeleteQuestionUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteQuestionRequest(question_id=str(uuid4())))
