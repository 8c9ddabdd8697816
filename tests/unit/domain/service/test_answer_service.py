"""Unit tests for AnswerService."""

from uuid import uuid4

import pytest

from icebreaker.domain.error import NotFoundError, ValidationError
from icebreaker.domain.repository import (
    AnswerRepository,
    QuestionRepository,
    UserRepository,
)
from icebreaker.domain.service import AnswerDraft, AnswerService
from icebreaker.domain.value import AnswerId, QuestionId, UserId
from tests.conftest import at, make_answer, make_question, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed_question_and_user(unit_env):
    """Store one user and one question asked by them."""
    user_repo = await unit_env.get(UserRepository)
    question_repo = await unit_env.get(QuestionRepository)
    user = await user_repo.add(make_user())
    question = await question_repo.add(make_question(user_id=user.id))
    return question, user


class TestCreateAnswer:
    """Tests for create_answer."""

    @pytest.mark.asyncio
    async def test_create_answer_persists(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question, user = await seed_question_and_user(unit_env)

        # Act
        answer = await answer_service.create_answer(
            question.id, user.id, "Rayleigh scattering."
        )

        # Assert
        assert answer.is_accepted is False
        assert answer.view_count == 0
        assert (await answer_service.get_answer(answer.id)).id == answer.id

    @pytest.mark.asyncio
    async def test_create_answer_for_missing_question_raises(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        _, user = await seed_question_and_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Question not found"):
            await answer_service.create_answer(QuestionId(uuid4()), user.id, "Text")

    @pytest.mark.asyncio
    async def test_create_answer_by_missing_user_raises(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question, _ = await seed_question_and_user(unit_env)

        # Act & Assert
        with pytest.raises(NotFoundError, match="User not found"):
            await answer_service.create_answer(question.id, UserId(uuid4()), "Text")


class TestBulkCreateAnswers:
    """Tests for bulk_create_answers."""

    @pytest.mark.asyncio
    async def test_bulk_create_reports_failures_by_index(self, unit_env):
        """Invalid drafts are reported by index; valid ones are stored."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question, user = await seed_question_and_user(unit_env)
        drafts = [
            AnswerDraft(question.id, user.id, "First answer"),
            AnswerDraft(question.id, user.id, "   "),
            AnswerDraft(QuestionId(uuid4()), user.id, "Dangling question"),
            AnswerDraft(question.id, user.id, "Last answer"),
        ]

        # Act
        result = await answer_service.bulk_create_answers(drafts)

        # Assert
        assert [a.content for a in result.successes] == ["First answer", "Last answer"]
        assert [e.index for e in result.errors] == [1, 2]
        assert "Content is required" in result.errors[0].message
        assert result.total_processed == 4
        assert result.has_errors is True
        assert len(await answer_repo.find_by_question(question.id)) == 2


class TestGetAnswer:
    """Tests for get_answer."""

    @pytest.mark.asyncio
    async def test_get_answer_counts_views(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.add(make_answer())

        # Act
        await answer_service.get_answer(answer.id)
        result = await answer_service.get_answer(answer.id)

        # Assert
        assert result.view_count == 2

    @pytest.mark.asyncio
    async def test_get_missing_answer_raises(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError, match="Answer not found"):
            await answer_service.get_answer(AnswerId(uuid4()))


class TestUpdateAndDelete:
    """Tests for update_answer and delete_answer."""

    @pytest.mark.asyncio
    async def test_update_answer_content(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.add(make_answer())

        # Act
        updated = await answer_service.update_answer(answer.id, "Revised answer.")

        # Assert
        assert updated.content == "Revised answer."
        assert (await answer_repo.find_by_id(answer.id)).content == "Revised answer."

    @pytest.mark.asyncio
    async def test_deleted_answer_is_hidden(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.add(make_answer())

        # Act
        await answer_service.delete_answer(answer.id)

        # Assert
        with pytest.raises(NotFoundError):
            await answer_service.get_answer(answer.id)
        page = await answer_service.list_answers(question_id=answer.question_id)
        assert page.items == []


class TestAcceptAnswer:
    """Tests for accept_answer and get_accepted_answer."""

    @pytest.mark.asyncio
    async def test_accepting_replaces_previous_acceptance(self, unit_env):
        """At most one answer per question is accepted."""
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_id = QuestionId(uuid4())
        first = await answer_repo.add(make_answer(question_id, is_accepted=True))
        second = await answer_repo.add(make_answer(question_id))

        # Act
        await answer_service.accept_answer(second.id)

        # Assert
        accepted = [
            a for a in await answer_repo.find_by_question(question_id) if a.is_accepted
        ]
        assert [a.id for a in accepted] == [second.id]
        assert (await answer_service.get_accepted_answer(question_id)).id == second.id
        assert (await answer_repo.find_by_id(first.id)).is_accepted is False

    @pytest.mark.asyncio
    async def test_accept_missing_answer_raises(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await answer_service.accept_answer(AnswerId(uuid4()))

    @pytest.mark.asyncio
    async def test_no_accepted_answer_raises(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        answer = await answer_repo.add(make_answer())

        # Act & Assert
        with pytest.raises(NotFoundError, match="Accepted answer for question"):
            await answer_service.get_accepted_answer(answer.question_id)


class TestListAnswers:
    """Tests for list_answers."""

    @pytest.mark.asyncio
    async def test_list_filters_by_question_and_user(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        answer_repo = await unit_env.get(AnswerRepository)
        question_id = QuestionId(uuid4())
        user_id = UserId(uuid4())
        mine = await answer_repo.add(
            make_answer(question_id, user_id, created_at=at(1))
        )
        newer = await answer_repo.add(make_answer(question_id, created_at=at(2)))
        await answer_repo.add(make_answer(user_id=user_id))

        # Act
        by_question = await answer_service.list_answers(question_id=question_id)
        by_both = await answer_service.list_answers(
            question_id=question_id, user_id=user_id
        )

        # Assert
        assert [a.id for a in by_question.items] == [newer.id, mine.id]
        assert [a.id for a in by_both.items] == [mine.id]

    @pytest.mark.asyncio
    async def test_blank_content_is_rejected_on_create(self, unit_env):
        # Arrange
        answer_service = await unit_env.get(AnswerService)
        question, user = await seed_question_and_user(unit_env)

        # Act & Assert
        with pytest.raises(ValidationError):
            await answer_service.create_answer(question.id, user.id, "")
