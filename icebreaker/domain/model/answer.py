"""Question answer entity."""

from typing import Optional
from uuid import uuid4

from pydantic import Field

from icebreaker.domain.model.common import Entity, non_blank, require_id, require_text
from icebreaker.domain.value import AnswerId, QuestionId, UserId


class QuestionAnswer(Entity):
    """An answer to a question.

    At most one answer per question is accepted at any time; acceptance is
    managed by the answer repository over the whole collection.
    """

    id: AnswerId = Field(default_factory=lambda: AnswerId(uuid4()))
    question_id: QuestionId
    user_id: UserId
    content: str
    is_accepted: bool = False
    view_count: int = Field(default=0, ge=0)

    @classmethod
    def create(
        cls, question_id: QuestionId, user_id: UserId, content: str
    ) -> "QuestionAnswer":
        """Create a new answer.

        Raises:
            ValidationError: If an id is empty or content is blank
        """
        return cls(
            question_id=require_id(question_id, "QuestionId"),
            user_id=require_id(user_id, "UserId"),
            content=require_text(content, "Content"),
        )

    def update_content(self, content: Optional[str]) -> "QuestionAnswer":
        """Replace the content. A blank value leaves it unchanged."""
        changes = {}
        if content := non_blank(content):
            changes["content"] = content
        return self._touch(**changes)

    def accept(self) -> "QuestionAnswer":
        return self._touch(is_accepted=True)

    def unaccept(self) -> "QuestionAnswer":
        return self._touch(is_accepted=False)

    def increment_view_count(self) -> "QuestionAnswer":
        return self._touch(view_count=self.view_count + 1)

    def delete(self) -> "QuestionAnswer":
        """Soft-delete the answer."""
        return self._touch(is_active=False)
