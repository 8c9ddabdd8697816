"""Question routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, field_validator

from icebreaker.application.usecase.question import (
    BulkCreateQuestionsRequest,
    BulkCreateQuestionsResponse,
    BulkCreateQuestionsUseCase,
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionResponse,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
)

router = APIRouter(prefix="/api/questions", tags=["questions"], route_class=DishkaRoute)


class CreateQuestionAPIRequest(BaseModel):
    """API request for asking a question."""

    user_id: UUID
    topic_id: UUID
    title: str = Field(min_length=5, max_length=200)
    content: str = Field(min_length=10, max_length=5000)


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question. Omitted or blank fields keep their value."""

    title: str | None = Field(default=None, min_length=5, max_length=200)
    content: str | None = Field(default=None, min_length=10, max_length=5000)
    topic_id: UUID | None = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def blank_as_unset(cls, value):
        # Blank strings mean "keep the current value"
        if isinstance(value, str) and not value.strip():
            return None
        return value


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    use_case: FromDishka[ListQuestionsUseCase],
    page_number: int = 1,
    page_size: int = 10,
    sort_by: str | None = None,
    sort_order: str | None = None,
    search: str | None = None,
    topic_id: UUID | None = None,
) -> ListQuestionsResponse:
    """List questions with filtering, sorting and pagination.

    Args:
        use_case: List questions use case (injected)
        page_number: 1-based page number (values below 1 are treated as 1)
        page_size: Page size (clamped to 1-100)
        sort_by: title, createdAt, likeCount or viewCount (default createdAt)
        sort_order: asc or desc (default desc)
        search: Case-insensitive match on title or content
        topic_id: Only questions under this topic

    Returns:
        One page of questions with author display name and topic name

    Example:
        GET /api/questions?sort_by=likeCount&sort_order=desc&page_size=20
    """
    request = ListQuestionsRequest(
        page_number=page_number,
        page_size=page_size,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search,
        topic_id=str(topic_id) if topic_id else None,
    )
    return await use_case.execute(request)


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: UUID, use_case: FromDishka[GetQuestionUseCase]
) -> QuestionResponse:
    """Get a question by ID. Each successful read counts as one view.

    Raises:
        HTTPException: If the question does not exist or was deleted
    """
    result = await use_case.execute(GetQuestionRequest(question_id=str(question_id)))
    if not result:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Question not found: {question_id}",
        )
    return result


@router.post("", response_model=QuestionResponse, status_code=status.HTTP_201_CREATED)
async def create_question(
    request: CreateQuestionAPIRequest, use_case: FromDishka[CreateQuestionUseCase]
) -> QuestionResponse:
    """Ask a question.

    Raises:
        NotFoundError: If the user or topic does not exist (404)
    """
    return await use_case.execute(
        CreateQuestionRequest(
            user_id=str(request.user_id),
            topic_id=str(request.topic_id),
            title=request.title,
            content=request.content,
        )
    )


@router.post("/bulk", response_model=BulkCreateQuestionsResponse)
async def bulk_create_questions(
    questions: list[CreateQuestionRequest],
    use_case: FromDishka[BulkCreateQuestionsUseCase],
) -> BulkCreateQuestionsResponse:
    """Create several questions at once.

    Items are not validated as a whole request: each item that fails is
    reported by its index in `errors` while the others are still created.
    """
    logfire.info("Bulk question create requested", count=len(questions))
    return await use_case.execute(BulkCreateQuestionsRequest(questions=questions))


@router.api_route(
    "/{question_id}", methods=["PUT", "PATCH"], response_model=QuestionResponse
)
async def update_question(
    question_id: UUID,
    request: UpdateQuestionAPIRequest,
    use_case: FromDishka[UpdateQuestionUseCase],
) -> QuestionResponse:
    """Edit a question's title, content and/or topic."""
    return await use_case.execute(
        UpdateQuestionRequest(
            question_id=str(question_id),
            title=request.title,
            content=request.content,
            topic_id=str(request.topic_id) if request.topic_id else None,
        )
    )


@router.delete("/{question_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_question(
    question_id: UUID, use_case: FromDishka[DeleteQuestionUseCase]
) -> None:
    """Soft-delete a question."""
    await use_case.execute(DeleteQuestionRequest(question_id=str(question_id)))
