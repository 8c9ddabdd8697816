"""Topic entity.

Topics group questions by subject. Unlike other entities, topics are
removed from storage when deleted.
"""

from typing import Optional
from uuid import uuid4

from pydantic import Field

from icebreaker.domain.model.common import Entity, non_blank, require_text
from icebreaker.domain.value import TopicId


class Topic(Entity):
    """Topic entity."""

    id: TopicId = Field(default_factory=lambda: TopicId(uuid4()))
    name: str
    description: Optional[str] = None

    @classmethod
    def create(cls, name: str, description: Optional[str] = None) -> "Topic":
        """Create a new topic with a trimmed name.

        Raises:
            ValidationError: If name is blank
        """
        return cls(name=require_text(name, "Name"), description=non_blank(description))

    def update(
        self, name: Optional[str] = None, description: Optional[str] = None
    ) -> "Topic":
        """Rename and/or redescribe the topic.

        A blank name is ignored. A supplied description replaces the current
        one, and a blank one clears it.
        """
        changes: dict = {}
        if description is not None:
            changes["description"] = non_blank(description)
        if name := non_blank(name):
            changes["name"] = name
        return self._touch(**changes)
