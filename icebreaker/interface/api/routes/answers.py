"""Answer routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field

from icebreaker.domain.model import QuestionAnswer
from icebreaker.domain.service import AnswerDraft, AnswerService
from icebreaker.domain.value import (
    AnswerId,
    BulkResult,
    PagedResult,
    QuestionId,
    UserId,
)

router = APIRouter(prefix="/api/answers", tags=["answers"], route_class=DishkaRoute)


class AnswerResponse(BaseModel):
    """Answer details."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    question_id: UUID
    user_id: UUID
    content: str
    is_accepted: bool
    view_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(cls, answer: QuestionAnswer) -> "AnswerResponse":
        return cls.model_validate(answer)


class CreateAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    question_id: UUID
    user_id: UUID
    content: str = Field(min_length=10, max_length=5000)


class BulkAnswerItem(BaseModel):
    """One answer of a bulk create. Content is checked per item."""

    question_id: UUID
    user_id: UUID
    content: str


class UpdateAnswerAPIRequest(BaseModel):
    """API request for editing an answer."""

    content: str = Field(min_length=10, max_length=5000)


@router.get("", response_model=PagedResult[AnswerResponse])
async def list_answers(
    answer_service: FromDishka[AnswerService],
    page_number: int = 1,
    page_size: int = 10,
    question_id: UUID | None = None,
    user_id: UUID | None = None,
) -> PagedResult[AnswerResponse]:
    """List active answers, newest first, optionally by question and/or user."""
    page = await answer_service.list_answers(
        page_number,
        page_size,
        question_id=QuestionId(question_id) if question_id else None,
        user_id=UserId(user_id) if user_id else None,
    )
    return page.map(AnswerResponse.from_answer)


@router.get("/question/{question_id}/accepted", response_model=AnswerResponse)
async def get_accepted_answer(
    question_id: UUID, answer_service: FromDishka[AnswerService]
) -> AnswerResponse:
    """Get the accepted answer of a question.

    Raises:
        NotFoundError: If the question has no accepted answer (404)
    """
    answer = await answer_service.get_accepted_answer(QuestionId(question_id))
    return AnswerResponse.from_answer(answer)


@router.get("/{answer_id}", response_model=AnswerResponse)
async def get_answer(
    answer_id: UUID, answer_service: FromDishka[AnswerService]
) -> AnswerResponse:
    """Get an answer by ID. Each successful read counts as one view."""
    answer = await answer_service.get_answer(AnswerId(answer_id))
    return AnswerResponse.from_answer(answer)


@router.post("", response_model=AnswerResponse, status_code=status.HTTP_201_CREATED)
async def create_answer(
    request: CreateAnswerAPIRequest, answer_service: FromDishka[AnswerService]
) -> AnswerResponse:
    """Answer a question.

    Raises:
        NotFoundError: If the question or user does not exist (404)
    """
    answer = await answer_service.create_answer(
        QuestionId(request.question_id), UserId(request.user_id), request.content
    )
    return AnswerResponse.from_answer(answer)


@router.post("/bulk", response_model=BulkResult[AnswerResponse])
async def bulk_create_answers(
    answers: list[BulkAnswerItem], answer_service: FromDishka[AnswerService]
) -> BulkResult[AnswerResponse]:
    """Create several answers at once.

    Failing items are reported by index; the rest are stored together.
    """
    drafts = [
        AnswerDraft(
            question_id=QuestionId(a.question_id),
            user_id=UserId(a.user_id),
            content=a.content,
        )
        for a in answers
    ]
    result = await answer_service.bulk_create_answers(drafts)
    return BulkResult(
        successes=[AnswerResponse.from_answer(a) for a in result.successes],
        errors=result.errors,
    )


@router.put("/{answer_id}", response_model=AnswerResponse)
async def update_answer(
    answer_id: UUID,
    request: UpdateAnswerAPIRequest,
    answer_service: FromDishka[AnswerService],
) -> AnswerResponse:
    """Replace an answer's content."""
    answer = await answer_service.update_answer(AnswerId(answer_id), request.content)
    return AnswerResponse.from_answer(answer)


@router.delete("/{answer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_answer(
    answer_id: UUID, answer_service: FromDishka[AnswerService]
) -> None:
    """Soft-delete an answer."""
    await answer_service.delete_answer(AnswerId(answer_id))


@router.post("/{answer_id}/accept", response_model=AnswerResponse)
async def accept_answer(
    answer_id: UUID, answer_service: FromDishka[AnswerService]
) -> AnswerResponse:
    """Accept an answer, unaccepting any other answer to the same question."""
    answer = await answer_service.accept_answer(AnswerId(answer_id))
    return AnswerResponse.from_answer(answer)
