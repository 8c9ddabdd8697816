"""Question answer repository over an entity store."""

from typing import Optional, Sequence

import logfire

from icebreaker.domain.model.answer import QuestionAnswer
from icebreaker.domain.repository.answer import AnswerRepository
from icebreaker.domain.value import AnswerId, PagedResult, QuestionId, UserId, paginate
from icebreaker.persistence.repository.base import StoreRepository


def _newest_first(answers: list[QuestionAnswer]) -> list[QuestionAnswer]:
    return sorted(answers, key=lambda a: a.created_at, reverse=True)


class StoreAnswerRepository(StoreRepository[QuestionAnswer], AnswerRepository):
    """Store-backed implementation of AnswerRepository."""

    resource = "Answer"

    async def find_by_id(self, answer_id: AnswerId) -> Optional[QuestionAnswer]:
        return await self._find_by_id(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[QuestionAnswer]:
        answers = await self._active()
        return _newest_first([a for a in answers if a.question_id == question_id])

    async def find_by_user(self, user_id: UserId) -> list[QuestionAnswer]:
        answers = await self._active()
        return _newest_first([a for a in answers if a.user_id == user_id])

    async def find_accepted(self, question_id: QuestionId) -> Optional[QuestionAnswer]:
        for answer in await self._active():
            if answer.question_id == question_id and answer.is_accepted:
                return answer
        return None

    async def find_page(
        self,
        page_number: int,
        page_size: int,
        question_id: Optional[QuestionId] = None,
        user_id: Optional[UserId] = None,
    ) -> PagedResult[QuestionAnswer]:
        answers = await self._active()

        if question_id is not None:
            answers = [a for a in answers if a.question_id == question_id]
        if user_id is not None:
            answers = [a for a in answers if a.user_id == user_id]

        return paginate(_newest_first(answers), page_number, page_size)

    async def add(self, answer: QuestionAnswer) -> QuestionAnswer:
        return await self._add(answer)

    async def add_bulk(self, answers: Sequence[QuestionAnswer]) -> list[QuestionAnswer]:
        return await self._add_bulk(answers)

    async def update(self, answer: QuestionAnswer) -> QuestionAnswer:
        return await self._update(answer)

    async def delete(self, answer_id: AnswerId) -> bool:
        return await self._soft_delete(answer_id)

    async def mark_accepted(self, answer_id: AnswerId) -> Optional[QuestionAnswer]:
        async with self.store.modify() as items:
            target = next(
                (a for a in items if a.id == answer_id and a.is_active), None
            )
            if target is None:
                logfire.info(
                    "Accept skipped, answer not found", answer_id=str(answer_id)
                )
                return None

            accepted = None
            for i, answer in enumerate(items):
                if answer.question_id != target.question_id:
                    continue
                if answer.id == answer_id:
                    accepted = items[i] = answer.accept()
                elif answer.is_accepted:
                    items[i] = answer.unaccept()

        return accepted
