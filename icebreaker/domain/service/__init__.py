"""Domain services."""

from .answer_service import AnswerDraft, AnswerService
from .base import Service
from .like_service import LikeService
from .question_service import QuestionService
from .topic_service import TopicService
from .user_service import UserService

__all__ = [
    "AnswerDraft",
    "AnswerService",
    "LikeService",
    "QuestionService",
    "Service",
    "TopicService",
    "UserService",
]
