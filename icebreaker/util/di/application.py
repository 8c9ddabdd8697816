"""Application layer DI providers."""

from dishka import Scope, provide

from icebreaker.application.usecase.question import (
    BulkCreateQuestionsUseCase,
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    QuestionEnricher,
    UpdateQuestionUseCase,
)
from icebreaker.domain.repository import (
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from icebreaker.domain.service import QuestionService, TopicService, UserService
from icebreaker.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_question_enricher(
        self, user_repository: UserRepository, topic_repository: TopicRepository
    ) -> QuestionEnricher:
        """Provide question enricher."""
        return QuestionEnricher(
            user_repository=user_repository, topic_repository=topic_repository
        )

    # Question use cases
    @provide(scope=Scope.REQUEST)
    def get_get_question_use_case(
        self, question_service: QuestionService, enricher: QuestionEnricher
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(question_service=question_service, enricher=enricher)

    @provide(scope=Scope.REQUEST)
    def get_list_questions_use_case(
        self, question_repository: QuestionRepository, enricher: QuestionEnricher
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_repository=question_repository, enricher=enricher
        )

    @provide(scope=Scope.REQUEST)
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        user_service: UserService,
        topic_service: TopicService,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            user_service=user_service,
            topic_service=topic_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_question_use_case(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        enricher: QuestionEnricher,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service,
            topic_service=topic_service,
            enricher=enricher,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_question_use_case(
        self, question_service: QuestionService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(question_service=question_service)

    @provide(scope=Scope.REQUEST)
    def get_bulk_create_questions_use_case(
        self, create_question_use_case: CreateQuestionUseCase
    ) -> BulkCreateQuestionsUseCase:
        """Provide bulk create questions use case."""
        return BulkCreateQuestionsUseCase(
            create_question_use_case=create_question_use_case
        )
