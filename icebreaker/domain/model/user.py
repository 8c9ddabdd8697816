"""User aggregate root."""

from typing import Optional
from uuid import uuid4

from pydantic import Field

from icebreaker.domain.model.common import Entity, non_blank, require_text
from icebreaker.domain.value import UserId


class User(Entity):
    """A registered member who asks and answers questions.

    Username and email are unique across active users, compared
    case-insensitively.
    """

    id: UserId = Field(default_factory=lambda: UserId(uuid4()))
    username: str
    email: str
    display_name: str
    bio: Optional[str] = None

    @classmethod
    def create(
        cls,
        username: str,
        email: str,
        display_name: str,
        bio: Optional[str] = None,
    ) -> "User":
        """Create a new user.

        Raises:
            ValidationError: If username, email or display name is blank
        """
        return cls(
            username=require_text(username, "Username"),
            email=require_text(email, "Email"),
            display_name=require_text(display_name, "Display name"),
            bio=non_blank(bio),
        )

    def update_profile(
        self, display_name: Optional[str] = None, bio: Optional[str] = None
    ) -> "User":
        """Apply a partial profile update. Blank values leave fields unchanged."""
        changes = {}
        if display_name := non_blank(display_name):
            changes["display_name"] = display_name
        if bio := non_blank(bio):
            changes["bio"] = bio
        return self._touch(**changes)

    def delete(self) -> "User":
        """Soft-delete the user."""
        return self._touch(is_active=False)
