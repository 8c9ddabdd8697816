"""Shared plumbing for repositories backed by an entity store."""

from collections.abc import Callable, Sequence
from typing import ClassVar, Generic, Optional, TypeVar
from uuid import UUID

from icebreaker.domain.error import NotFoundError
from icebreaker.domain.model import Entity
from icebreaker.persistence.store import EntityStore

T = TypeVar("T", bound=Entity)


def matches(value: Optional[str], search: str) -> bool:
    """Case-insensitive substring match that tolerates missing values."""
    return value is not None and search.casefold() in value.casefold()


def same_text(a: str, b: str) -> bool:
    """Case-insensitive equality."""
    return a.casefold() == b.casefold()


class StoreRepository(Generic[T]):
    """Base for repositories over one entity store.

    Every mutation loads the whole collection, changes it and writes it back
    inside one `store.modify()` cycle.
    """

    resource: ClassVar[str]

    def __init__(self, store: EntityStore[T]) -> None:
        self.store = store

    async def _active(self) -> list[T]:
        return [item for item in await self.store.read_all() if item.is_active]

    async def _find_by_id(self, entity_id: UUID) -> Optional[T]:
        for item in await self._active():
            if item.id == entity_id:
                return item
        return None

    async def _find_by_ids(self, entity_ids: Sequence[UUID]) -> list[T]:
        if not entity_ids:
            return []
        wanted = set(entity_ids)
        return [item for item in await self._active() if item.id in wanted]

    async def _add(self, entity: T) -> T:
        async with self.store.modify() as items:
            items.append(entity)
        return entity

    async def _add_bulk(self, entities: Sequence[T]) -> list[T]:
        entities = list(entities)
        if not entities:
            return []
        async with self.store.modify() as items:
            items.extend(entities)
        return entities

    async def _update(self, entity: T) -> T:
        async with self.store.modify() as items:
            for i, item in enumerate(items):
                if item.id == entity.id:
                    items[i] = entity
                    return entity
        raise NotFoundError(self.resource, str(entity.id))

    async def _change_active(
        self, entity_id: UUID, change: Callable[[T], T]
    ) -> Optional[T]:
        """Apply `change` to the active record with `entity_id` in one locked cycle."""
        async with self.store.modify() as items:
            for i, item in enumerate(items):
                if item.id == entity_id and item.is_active:
                    items[i] = change(item)
                    return items[i]
        return None

    async def _soft_delete(self, entity_id: UUID) -> bool:
        deleted = await self._change_active(entity_id, lambda item: item.delete())
        return deleted is not None

    async def _hard_delete(self, predicate: Callable[[T], bool]) -> bool:
        async with self.store.modify() as items:
            kept = [item for item in items if not predicate(item)]
            removed = len(kept) != len(items)
            items[:] = kept
        return removed
