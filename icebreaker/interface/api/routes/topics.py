"""Topic routes."""

from datetime import datetime
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, ConfigDict, Field

from icebreaker.domain.model import Topic
from icebreaker.domain.service import TopicService
from icebreaker.domain.value import PagedResult, TopicId

router = APIRouter(prefix="/api/topics", tags=["topics"], route_class=DishkaRoute)

TOPIC_NAME_PATTERN = r"^[a-zA-Z0-9\s\-\.]+$"


class TopicResponse(BaseModel):
    """Topic details."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicResponse":
        return cls.model_validate(topic)


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    name: str = Field(min_length=2, max_length=100, pattern=TOPIC_NAME_PATTERN)
    description: str | None = Field(default=None, max_length=500)


class UpdateTopicAPIRequest(BaseModel):
    """API request for updating a topic.

    An omitted name keeps the current one. An empty description clears it.
    """

    name: str | None = Field(
        default=None, min_length=2, max_length=100, pattern=TOPIC_NAME_PATTERN
    )
    description: str | None = Field(default=None, max_length=500)


@router.get("", response_model=PagedResult[TopicResponse])
async def list_topics(
    topic_service: FromDishka[TopicService],
    page_number: int = 1,
    page_size: int = 10,
    search: str | None = None,
) -> PagedResult[TopicResponse]:
    """List topics ordered by name.

    Raises:
        ValidationError: If page_number < 1 or page_size is not in [1, 100] (400)
    """
    page = await topic_service.list_topics(page_number, page_size, search)
    return page.map(TopicResponse.from_topic)


@router.get("/all", response_model=list[TopicResponse])
async def get_all_topics(
    topic_service: FromDishka[TopicService],
) -> list[TopicResponse]:
    """Get every topic ordered by name, unpaginated."""
    return [TopicResponse.from_topic(t) for t in await topic_service.get_all_topics()]


@router.get("/{topic_id}", response_model=TopicResponse)
async def get_topic(
    topic_id: UUID, topic_service: FromDishka[TopicService]
) -> TopicResponse:
    """Get a topic by ID."""
    return TopicResponse.from_topic(await topic_service.get_by_id(TopicId(topic_id)))


@router.post("", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
async def create_topic(
    request: CreateTopicAPIRequest, topic_service: FromDishka[TopicService]
) -> TopicResponse:
    """Create a topic.

    Raises:
        ConflictError: If a topic with the same name exists (409)
    """
    topic = await topic_service.create_topic(request.name, request.description)
    return TopicResponse.from_topic(topic)


@router.put("/{topic_id}", response_model=TopicResponse)
async def update_topic(
    topic_id: UUID,
    request: UpdateTopicAPIRequest,
    topic_service: FromDishka[TopicService],
) -> TopicResponse:
    """Rename and/or redescribe a topic."""
    topic = await topic_service.update_topic(
        TopicId(topic_id), name=request.name, description=request.description
    )
    return TopicResponse.from_topic(topic)


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(topic_id: UUID, topic_service: FromDishka[TopicService]) -> None:
    """Delete a topic. Its questions are left in place."""
    await topic_service.delete_topic(TopicId(topic_id))
