"""Repository interfaces for IceBreaker domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from icebreaker.domain.repository.answer import AnswerRepository
from icebreaker.domain.repository.like import LikeRepository
from icebreaker.domain.repository.question import QuestionRepository
from icebreaker.domain.repository.topic import TopicRepository
from icebreaker.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "TopicRepository",
    "QuestionRepository",
    "AnswerRepository",
    "LikeRepository",
]
