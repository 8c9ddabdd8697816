"""Question repository over an entity store."""

from typing import Optional, Sequence

from icebreaker.domain.model.question import Question
from icebreaker.domain.repository.question import QuestionRepository
from icebreaker.domain.value import (
    PagedResult,
    QuestionId,
    QuestionSortField,
    SortOrder,
    TopicId,
    paginate,
)
from icebreaker.persistence.repository.base import StoreRepository, matches

SORT_KEYS = {
    QuestionSortField.TITLE: lambda q: q.title.casefold(),
    QuestionSortField.CREATED_AT: lambda q: q.created_at,
    QuestionSortField.LIKE_COUNT: lambda q: q.like_count,
    QuestionSortField.VIEW_COUNT: lambda q: q.view_count,
}


class StoreQuestionRepository(StoreRepository[Question], QuestionRepository):
    """Store-backed implementation of QuestionRepository."""

    resource = "Question"

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        return await self._find_by_id(question_id)

    async def find_by_ids(self, question_ids: Sequence[QuestionId]) -> list[Question]:
        return await self._find_by_ids(question_ids)

    async def find_page(
        self,
        page_number: int,
        page_size: int,
        search: Optional[str] = None,
        topic_id: Optional[TopicId] = None,
        sort_by: QuestionSortField = QuestionSortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> PagedResult[Question]:
        questions = await self._active()

        # Filter
        if search:
            questions = [
                q
                for q in questions
                if matches(q.title, search) or matches(q.content, search)
            ]
        if topic_id is not None:
            questions = [q for q in questions if q.topic_id == topic_id]

        # Sort
        questions.sort(
            key=SORT_KEYS[sort_by],
            reverse=sort_order == SortOrder.DESC,
        )

        # Paginate
        return paginate(questions, page_number, page_size)

    async def add(self, question: Question) -> Question:
        return await self._add(question)

    async def add_bulk(self, questions: Sequence[Question]) -> list[Question]:
        return await self._add_bulk(questions)

    async def update(self, question: Question) -> Question:
        return await self._update(question)

    async def delete(self, question_id: QuestionId) -> bool:
        return await self._soft_delete(question_id)

    async def increment_like_count(self, question_id: QuestionId) -> Optional[Question]:
        return await self._change_active(question_id, Question.increment_like_count)

    async def decrement_like_count(self, question_id: QuestionId) -> Optional[Question]:
        return await self._change_active(question_id, Question.decrement_like_count)

    async def increment_answer_count(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        return await self._change_active(question_id, Question.increment_answer_count)

    async def decrement_answer_count(
        self, question_id: QuestionId
    ) -> Optional[Question]:
        return await self._change_active(question_id, Question.decrement_answer_count)
