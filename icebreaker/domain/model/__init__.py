"""Domain models for IceBreaker."""

from icebreaker.domain.model.answer import QuestionAnswer
from icebreaker.domain.model.common import DomainModel, Entity
from icebreaker.domain.model.like import QuestionLike
from icebreaker.domain.model.question import Question
from icebreaker.domain.model.topic import Topic
from icebreaker.domain.model.user import User

__all__ = [
    "DomainModel",
    "Entity",
    "User",
    "Topic",
    "Question",
    "QuestionAnswer",
    "QuestionLike",
]
