"""Question response shape and enrichment.

Responses carry the owning user's display name and the topic name next to
the question's own fields. Dangling references leave those fields empty.
"""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from icebreaker.domain.model import Question, Topic, User
from icebreaker.domain.repository import TopicRepository, UserRepository


class QuestionResponse(BaseModel):
    """Question with joined user and topic display fields."""

    id: str
    title: str
    content: str
    user_id: str
    user_display_name: str = ""
    topic_id: str
    topic_name: str = ""
    view_count: int
    like_count: int
    answer_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_question(
        cls,
        question: Question,
        user: Optional[User] = None,
        topic: Optional[Topic] = None,
    ) -> "QuestionResponse":
        return cls(
            id=str(question.id),
            title=question.title,
            content=question.content,
            user_id=str(question.user_id),
            user_display_name=user.display_name if user else "",
            topic_id=str(question.topic_id),
            topic_name=topic.name if topic else "",
            view_count=question.view_count,
            like_count=question.like_count,
            answer_count=question.answer_count,
            created_at=question.created_at,
            updated_at=question.updated_at,
        )


class QuestionEnricher:
    """Joins users and topics onto questions."""

    def __init__(
        self, user_repository: UserRepository, topic_repository: TopicRepository
    ) -> None:
        """Initialize question enricher.

        Args:
            user_repository: User repository
            topic_repository: Topic repository
        """
        self.user_repository = user_repository
        self.topic_repository = topic_repository

    async def enrich(self, question: Question) -> QuestionResponse:
        """Enrich one question with single user and topic lookups."""
        user = await self.user_repository.find_by_id(question.user_id)
        topic = await self.topic_repository.find_by_id(question.topic_id)
        return QuestionResponse.from_question(question, user, topic)

    async def enrich_many(
        self, questions: Sequence[Question]
    ) -> list[QuestionResponse]:
        """Enrich a page of questions.

        Issues exactly one batched user lookup and one batched topic lookup
        covering the distinct IDs referenced by `questions` (avoids N+1).
        """
        if not questions:
            return []

        user_ids = list(dict.fromkeys(q.user_id for q in questions))
        topic_ids = list(dict.fromkeys(q.topic_id for q in questions))

        users = {u.id: u for u in await self.user_repository.find_by_ids(user_ids)}
        topics = {t.id: t for t in await self.topic_repository.find_by_ids(topic_ids)}

        return [
            QuestionResponse.from_question(
                q, users.get(q.user_id), topics.get(q.topic_id)
            )
            for q in questions
        ]
