"""Domain layer DI providers."""

from dishka import Scope, provide

from icebreaker.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from icebreaker.domain.service import (
    AnswerService,
    LikeService,
    QuestionService,
    TopicService,
    UserService,
)
from icebreaker.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with the repository lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_topic_service(self, topic_repository: TopicRepository) -> TopicService:
        """Provide topic domain service."""
        return TopicService(topic_repository=topic_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(question_repository=question_repository)

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            user_repository=user_repository,
        )

    @provide
    def get_like_service(self, like_repository: LikeRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(like_repository=like_repository)
