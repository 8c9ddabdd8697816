"""Question aggregate root.

Questions are posted by a user under a topic and carry denormalized
counters for views, likes and answers.
"""

from typing import Optional
from uuid import uuid4

from pydantic import Field

from icebreaker.domain.model.common import Entity, non_blank, require_id, require_text
from icebreaker.domain.value import QuestionId, TopicId, UserId


class Question(Entity):
    """Question aggregate root.

    Counters never go below zero. Like and answer counters are maintained
    by explicit increment/decrement operations only.
    """

    id: QuestionId = Field(default_factory=lambda: QuestionId(uuid4()))
    user_id: UserId
    topic_id: TopicId
    title: str
    content: str
    view_count: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    answer_count: int = Field(default=0, ge=0)

    @classmethod
    def create(
        cls, user_id: UserId, topic_id: TopicId, title: str, content: str
    ) -> "Question":
        """Create a new question.

        Raises:
            ValidationError: If an id is empty or title/content is blank
        """
        return cls(
            user_id=require_id(user_id, "UserId"),
            topic_id=require_id(topic_id, "TopicId"),
            title=require_text(title, "Title"),
            content=require_text(content, "Content"),
        )

    def update(
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        topic_id: Optional[TopicId] = None,
    ) -> "Question":
        """Apply a partial update. Absent or blank values are left unchanged."""
        changes: dict = {}
        if title := non_blank(title):
            changes["title"] = title
        if content := non_blank(content):
            changes["content"] = content
        if topic_id is not None and topic_id.int != 0:
            changes["topic_id"] = topic_id
        return self._touch(**changes)

    def increment_view_count(self) -> "Question":
        return self._touch(view_count=self.view_count + 1)

    def increment_like_count(self) -> "Question":
        return self._touch(like_count=self.like_count + 1)

    def decrement_like_count(self) -> "Question":
        return self._touch(like_count=max(0, self.like_count - 1))

    def increment_answer_count(self) -> "Question":
        return self._touch(answer_count=self.answer_count + 1)

    def decrement_answer_count(self) -> "Question":
        return self._touch(answer_count=max(0, self.answer_count - 1))

    def delete(self) -> "Question":
        """Soft-delete the question."""
        return self._touch(is_active=False)
