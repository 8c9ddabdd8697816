"""Question like entity.

Likes are the only record of who liked what: at most one per
(question, user) pair, physically removed on unlike.
"""

from uuid import uuid4

from pydantic import Field

from icebreaker.domain.model.common import Entity, require_id
from icebreaker.domain.value import LikeId, QuestionId, UserId


class QuestionLike(Entity):
    """A user's like on a question."""

    id: LikeId = Field(default_factory=lambda: LikeId(uuid4()))
    question_id: QuestionId
    user_id: UserId

    @classmethod
    def create(cls, question_id: QuestionId, user_id: UserId) -> "QuestionLike":
        """Create a new like.

        Raises:
            ValidationError: If an id is empty
        """
        return cls(
            question_id=require_id(question_id, "QuestionId"),
            user_id=require_id(user_id, "UserId"),
        )
