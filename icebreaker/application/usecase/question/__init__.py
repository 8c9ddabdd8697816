"""Question use cases."""

from .bulk_create_questions import (
    BulkCreateQuestionsRequest,
    BulkCreateQuestionsResponse,
    BulkCreateQuestionsUseCase,
)
from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import DeleteQuestionRequest, DeleteQuestionUseCase
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .response import QuestionEnricher, QuestionResponse
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase

__all__ = [
    "BulkCreateQuestionsRequest",
    "BulkCreateQuestionsResponse",
    "BulkCreateQuestionsUseCase",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionEnricher",
    "QuestionResponse",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
]
