"""User domain service."""

from typing import Optional

import logfire

from icebreaker.domain.error import ConflictError, NotFoundError
from icebreaker.domain.model import User
from icebreaker.domain.repository import UserRepository
from icebreaker.domain.value import PagedResult, UserId, clamp_page

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found or deleted
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def list_users(
        self,
        page_number: int = 1,
        page_size: int = 10,
        search: Optional[str] = None,
    ) -> PagedResult[User]:
        """List active users, newest first.

        Out-of-range paging input is clamped.
        """
        page_number, page_size = clamp_page(page_number, page_size)
        with logfire.span(
            "user_service.list_users",
            page_number=page_number,
            page_size=page_size,
            search=search,
        ):
            return await self.user_repository.find_page(page_number, page_size, search)

    async def create_user(
        self,
        username: str,
        email: str,
        display_name: str,
        bio: Optional[str] = None,
    ) -> User:
        """Register a new user.

        Username and email must not be taken by another active user
        (compared case-insensitively). The check and the insert are separate
        repository calls.

        Args:
            username: Unique username
            email: Unique email
            display_name: Name shown next to questions and answers
            bio: Optional biography

        Returns:
            Created user

        Raises:
            ValidationError: If a required field is blank
            ConflictError: If username or email is already taken
        """
        with logfire.span("user_service.create_user", username=username):
            user = User.create(
                username=username, email=email, display_name=display_name, bio=bio
            )

            if await self.user_repository.exists_by_username(user.username):
                logfire.warn("Username already taken", username=user.username)
                raise ConflictError("User", "username", user.username)
            if await self.user_repository.exists_by_email(user.email):
                logfire.warn("Email already taken", email=user.email)
                raise ConflictError("User", "email", user.email)

            created = await self.user_repository.add(user)
            logfire.info("User created", user_id=str(created.id))
            return created

    async def update_profile(
        self,
        user_id: UserId,
        display_name: Optional[str] = None,
        bio: Optional[str] = None,
    ) -> User:
        """Update a user's display name and/or bio.

        Blank values leave the current value unchanged.

        Raises:
            NotFoundError: If user not found or deleted
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.get_by_id(user_id)
            updated = user.update_profile(display_name=display_name, bio=bio)
            return await self.user_repository.update(updated)

    async def delete_user(self, user_id: UserId) -> None:
        """Soft-delete a user.

        Raises:
            NotFoundError: If user not found or already deleted
        """
        with logfire.span("user_service.delete_user", user_id=str(user_id)):
            if not await self.user_repository.delete(user_id):
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            logfire.info("User deleted", user_id=str(user_id))

    async def get_user_by_email(self, email: str) -> User | None:
        """Get user by email (case-insensitive).

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_email", email=email):
            return await self.user_repository.find_by_email(email)

    async def get_user_by_username(self, username: str) -> User | None:
        """Get user by username (case-insensitive).

        Args:
            username: Username

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_username", username=username):
            return await self.user_repository.find_by_username(username)
