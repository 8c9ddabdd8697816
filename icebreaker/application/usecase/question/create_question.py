"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from icebreaker.domain.service import QuestionService, TopicService, UserService
from icebreaker.domain.value import TopicId, UserId

from .response import QuestionResponse


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    user_id: str
    topic_id: str
    title: str
    content: str


class CreateQuestionUseCase:
    """Use case for posting a new question."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
        topic_service: TopicService,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
            topic_service: Topic domain service
        """
        self.question_service = question_service
        self.user_service = user_service
        self.topic_service = topic_service

    async def execute(self, request: CreateQuestionRequest) -> QuestionResponse:
        """Execute create question flow.

        Steps:
        1. Load the user (must exist and be active)
        2. Load the topic (must exist)
        3. Create and store the question (validation happens in the model)

        The existence checks and the insert are not atomic.

        Args:
            request: Create question request

        Returns:
            The created question, enriched with the loaded user and topic

        Raises:
            NotFoundError: If the user or topic does not exist
            ValidationError: If title or content is blank
        """
        user_id = UserId(UUID(request.user_id))
        topic_id = TopicId(UUID(request.topic_id))

        with logfire.span(
            "create_question.execute", user_id=str(user_id), topic_id=str(topic_id)
        ):
            user = await self.user_service.get_by_id(user_id)
            topic = await self.topic_service.get_by_id(topic_id)

            question = await self.question_service.create_question(
                user_id=user.id,
                topic_id=topic.id,
                title=request.title,
                content=request.content,
            )

            return QuestionResponse.from_question(question, user, topic)
