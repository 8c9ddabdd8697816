"""User routes."""

from datetime import datetime
from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from icebreaker.domain.model import User
from icebreaker.domain.service import UserService
from icebreaker.domain.value import PagedResult, UserId

router = APIRouter(prefix="/api/users", tags=["users"], route_class=DishkaRoute)

USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"


class UserResponse(BaseModel):
    """User details."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    username: str
    email: str
    display_name: str
    bio: str | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls.model_validate(user)


class CreateUserAPIRequest(BaseModel):
    """API request for registering a user."""

    username: str = Field(min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    email: EmailStr
    display_name: str = Field(min_length=2, max_length=100)
    bio: str | None = Field(default=None, max_length=500)


class UpdateUserAPIRequest(BaseModel):
    """API request for updating a user profile.

    Omitted or blank fields keep their current value.
    """

    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)


@router.get("", response_model=PagedResult[UserResponse])
async def list_users(
    user_service: FromDishka[UserService],
    page_number: int = 1,
    page_size: int = 10,
    search: str | None = None,
) -> PagedResult[UserResponse]:
    """List active users, newest first.

    Args:
        user_service: User domain service from DI
        page_number: 1-based page number (values below 1 are treated as 1)
        page_size: Page size (clamped to 1-100)
        search: Optional case-insensitive match on username, display name or email

    Returns:
        One page of users
    """
    page = await user_service.list_users(page_number, page_size, search)
    return page.map(UserResponse.from_user)


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str, user_service: FromDishka[UserService]
) -> UserResponse:
    """Look up a user by username (case-insensitive)."""
    user = await user_service.get_user_by_username(username)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {username}",
        )
    return UserResponse.from_user(user)


@router.get("/by-email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str, user_service: FromDishka[UserService]
) -> UserResponse:
    """Look up a user by email (case-insensitive)."""
    user = await user_service.get_user_by_email(email)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User not found: {email}",
        )
    return UserResponse.from_user(user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID, user_service: FromDishka[UserService]
) -> UserResponse:
    """Get a user by ID.

    Raises:
        NotFoundError: If the user does not exist or was deleted (404)
    """
    user = await user_service.get_by_id(UserId(user_id))
    return UserResponse.from_user(user)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest, user_service: FromDishka[UserService]
) -> UserResponse:
    """Register a new user.

    Raises:
        ConflictError: If the username or email is already taken (409)
    """
    logfire.info("Creating user", username=request.username)
    user = await user_service.create_user(
        username=request.username,
        email=request.email,
        display_name=request.display_name,
        bio=request.bio,
    )
    return UserResponse.from_user(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    user_service: FromDishka[UserService],
) -> UserResponse:
    """Update a user's display name and/or bio."""
    user = await user_service.update_profile(
        UserId(user_id), display_name=request.display_name, bio=request.bio
    )
    return UserResponse.from_user(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, user_service: FromDishka[UserService]) -> None:
    """Soft-delete a user."""
    await user_service.delete_user(UserId(user_id))
