"""Entity stores.

An entity store holds every record of one entity type as a single
collection. Reads load the whole collection; writes replace it. Each
store instance owns one asyncio lock, held for every read, every write
and for the whole of a `modify()` cycle, so two operations on the same
entity type never interleave while stores of different types proceed
independently.
"""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, TypeVar

import logfire
import pydantic
from pydantic import TypeAdapter

from icebreaker.config import StorageSettings
from icebreaker.domain.model import (
    Entity,
    Question,
    QuestionAnswer,
    QuestionLike,
    Topic,
    User,
)
from icebreaker.persistence.error import StorageAccessError

T = TypeVar("T", bound=Entity)


class EntityStore(ABC, Generic[T]):
    """Lock-guarded collection of one entity type."""

    def __init__(self) -> None:
        self._lock = asyncio.Lock()

    @abstractmethod
    async def _load(self) -> list[T]:
        """Load the full collection. Called with the lock held."""
        pass

    @abstractmethod
    async def _save(self, items: list[T]) -> None:
        """Replace the full collection. Called with the lock held."""
        pass

    async def read_all(self) -> list[T]:
        """Return every stored record, active or not."""
        async with self._lock:
            return await self._load()

    async def write_all(self, items: Iterable[T]) -> None:
        """Replace the stored collection with `items`."""
        async with self._lock:
            await self._save(list(items))

    @asynccontextmanager
    async def modify(self) -> AsyncIterator[list[T]]:
        """Hold the lock across one load-mutate-store cycle.

        Yields the loaded collection as a mutable list. When the block exits
        normally and the list differs from what was loaded, the list is
        written back. Nothing is written if the block raises.

        Usage:
            async with store.modify() as items:
                items.append(entity)
        """
        async with self._lock:
            items = await self._load()
            snapshot = list(items)
            yield items
            if items != snapshot:
                await self._save(items)


class JsonFileEntityStore(EntityStore[T]):
    """Entity store backed by one JSON array file.

    - A missing file reads as an empty collection.
    - Unparseable or schema-invalid contents read as an empty collection
      and are logged; the next write overwrites the file.
    - Writes overwrite the whole file in place.
    - The parent directory is created on first write.
    - OS-level failures raise StorageAccessError.
    """

    def __init__(
        self,
        path: Path,
        model: type[T],
        by_alias: bool = True,
        indent: int | None = 2,
    ) -> None:
        """Initialize JSON file store.

        Args:
            path: Backing file path
            model: Entity model stored in the file
            by_alias: Write camelCase field names (snake_case when False)
            indent: JSON indent, None for compact output
        """
        super().__init__()
        self.path = Path(path)
        self.model = model
        self.by_alias = by_alias
        self.indent = indent
        self._adapter = TypeAdapter(list[model])

    async def _load(self) -> list[T]:
        return await asyncio.to_thread(self._read_file)

    async def _save(self, items: list[T]) -> None:
        await asyncio.to_thread(self._write_file, items)

    def _read_file(self) -> list[T]:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise StorageAccessError(str(self.path), str(e)) from e

        if not raw.strip():
            return []

        try:
            return self._adapter.validate_json(raw)
        except pydantic.ValidationError as e:
            logfire.warn(
                "Storage file unreadable, treating collection as empty",
                path=str(self.path),
                entity=self.model.__name__,
                error_count=e.error_count(),
            )
            return []

    def _write_file(self, items: list[T]) -> None:
        data = self._adapter.dump_json(
            items, by_alias=self.by_alias, indent=self.indent
        )
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(data)
        except OSError as e:
            raise StorageAccessError(str(self.path), str(e)) from e
        logfire.debug(
            "Storage file written",
            path=str(self.path),
            entity=self.model.__name__,
            count=len(items),
        )


class InMemoryEntityStore(EntityStore[T]):
    """Entity store kept in process memory, for tests."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        super().__init__()
        self._items: list[T] = list(items)

    async def _load(self) -> list[T]:
        return list(self._items)

    async def _save(self, items: list[T]) -> None:
        self._items = list(items)


@dataclass(frozen=True)
class EntityStores:
    """One store per entity type."""

    users: EntityStore[User]
    topics: EntityStore[Topic]
    questions: EntityStore[Question]
    answers: EntityStore[QuestionAnswer]
    likes: EntityStore[QuestionLike]

    @classmethod
    def json_files(cls, storage: StorageSettings) -> "EntityStores":
        """Build JSON file stores from storage settings."""
        by_alias = storage.naming_policy == "camel"
        indent = 2 if storage.write_indented else None

        def store(path: Path, model: type) -> JsonFileEntityStore:
            return JsonFileEntityStore(path, model, by_alias=by_alias, indent=indent)

        return cls(
            users=store(storage.users_path, User),
            topics=store(storage.topics_path, Topic),
            questions=store(storage.questions_path, Question),
            answers=store(storage.question_answers_path, QuestionAnswer),
            likes=store(storage.question_likes_path, QuestionLike),
        )

    @classmethod
    def in_memory(cls) -> "EntityStores":
        """Build empty in-memory stores."""
        return cls(
            users=InMemoryEntityStore(),
            topics=InMemoryEntityStore(),
            questions=InMemoryEntityStore(),
            answers=InMemoryEntityStore(),
            likes=InMemoryEntityStore(),
        )
