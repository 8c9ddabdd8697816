"""Repository implementations over entity stores."""

from icebreaker.persistence.repository.answer import StoreAnswerRepository
from icebreaker.persistence.repository.like import StoreLikeRepository
from icebreaker.persistence.repository.question import StoreQuestionRepository
from icebreaker.persistence.repository.topic import StoreTopicRepository
from icebreaker.persistence.repository.user import StoreUserRepository

__all__ = [
    "StoreUserRepository",
    "StoreTopicRepository",
    "StoreQuestionRepository",
    "StoreAnswerRepository",
    "StoreLikeRepository",
]
