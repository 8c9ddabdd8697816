"""User repository over an entity store."""

from typing import Optional, Sequence

from icebreaker.domain.model.user import User
from icebreaker.domain.repository.user import UserRepository
from icebreaker.domain.value import PagedResult, UserId, paginate
from icebreaker.persistence.repository.base import StoreRepository, matches, same_text


class StoreUserRepository(StoreRepository[User], UserRepository):
    """Store-backed implementation of UserRepository."""

    resource = "User"

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_by_id(user_id)

    async def find_by_ids(self, user_ids: Sequence[UserId]) -> list[User]:
        return await self._find_by_ids(user_ids)

    async def find_by_email(self, email: str) -> Optional[User]:
        for user in await self._active():
            if same_text(user.email, email):
                return user
        return None

    async def find_by_username(self, username: str) -> Optional[User]:
        for user in await self._active():
            if same_text(user.username, username):
                return user
        return None

    async def exists_by_email(self, email: str) -> bool:
        return await self.find_by_email(email) is not None

    async def exists_by_username(self, username: str) -> bool:
        return await self.find_by_username(username) is not None

    async def find_page(
        self, page_number: int, page_size: int, search: Optional[str] = None
    ) -> PagedResult[User]:
        users = await self._active()

        if search:
            users = [
                u
                for u in users
                if matches(u.username, search)
                or matches(u.display_name, search)
                or matches(u.email, search)
            ]

        users.sort(key=lambda u: u.created_at, reverse=True)
        return paginate(users, page_number, page_size)

    async def add(self, user: User) -> User:
        return await self._add(user)

    async def update(self, user: User) -> User:
        return await self._update(user)

    async def delete(self, user_id: UserId) -> bool:
        return await self._soft_delete(user_id)
