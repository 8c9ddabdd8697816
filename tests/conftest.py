"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire

from icebreaker.domain.model import Question, QuestionAnswer, Topic, User
from icebreaker.domain.value import AnswerId, QuestionId, TopicId, UserId

# Keep spans and logs local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Timestamp `minutes` after a fixed base time, for deterministic ordering."""
    return BASE_TIME + timedelta(minutes=minutes)


def make_user(username: str = "alice", **overrides) -> User:
    """Build an active user with sensible defaults."""
    fields = {
        "id": UserId(uuid4()),
        "username": username,
        "email": f"{username}@example.com",
        "display_name": username.capitalize(),
    }
    fields.update(overrides)
    return User(**fields)


def make_topic(name: str = "Physics", **overrides) -> Topic:
    """Build a topic with sensible defaults."""
    fields = {"id": TopicId(uuid4()), "name": name}
    fields.update(overrides)
    return Topic(**fields)


def make_question(
    user_id: UserId | None = None,
    topic_id: TopicId | None = None,
    title: str = "Why is the sky blue?",
    **overrides,
) -> Question:
    """Build an active question with sensible defaults."""
    fields = {
        "id": QuestionId(uuid4()),
        "user_id": user_id or UserId(uuid4()),
        "topic_id": topic_id or TopicId(uuid4()),
        "title": title,
        "content": "Looking for an explanation of Rayleigh scattering.",
    }
    fields.update(overrides)
    return Question(**fields)


def make_answer(
    question_id: QuestionId | None = None,
    user_id: UserId | None = None,
    **overrides,
) -> QuestionAnswer:
    """Build an active answer with sensible defaults."""
    fields = {
        "id": AnswerId(uuid4()),
        "question_id": question_id or QuestionId(uuid4()),
        "user_id": user_id or UserId(uuid4()),
        "content": "Shorter wavelengths scatter more strongly.",
    }
    fields.update(overrides)
    return QuestionAnswer(**fields)
