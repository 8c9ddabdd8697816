"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from icebreaker.domain.model.user import User
from icebreaker.domain.value import PagedResult, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Lookups only ever return active users.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find an active user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found and active, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        """Find active users by IDs (batch query).

        Unknown or inactive IDs are omitted from the result.

        Args:
            user_ids: IDs to look up

        Returns:
            Matching active users
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find an active user by email (case-insensitive)."""
        pass

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find an active user by username (case-insensitive)."""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        pass

    @abstractmethod
    async def find_page(
        self, page_number: int, page_size: int, search: Optional[str] = None
    ) -> PagedResult[User]:
        """Find a page of active users, newest first.

        Args:
            page_number: 1-based page number
            page_size: Users per page
            search: Case-insensitive substring of username, display name or email

        Returns:
            Page of users with the filtered total count
        """
        pass

    @abstractmethod
    async def add(self, user: User) -> User:
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Replace the stored user with the same ID.

        Raises:
            NotFoundError: If no user with this ID is stored
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> bool:
        """Soft-delete a user.

        Returns:
            True if an active user was deleted, False otherwise
        """
        pass
