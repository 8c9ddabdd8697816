"""Mock persistence providers for testing."""

from dishka import Scope, provide

from icebreaker.persistence.store import EntityStores
from icebreaker.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory stores.

    Stores are APP-scoped like the real ones, so data written in one request
    is visible to the next. Each test builds its own container and therefore
    starts from empty stores.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_entity_stores(self) -> EntityStores:
        """Provide empty in-memory stores."""
        return EntityStores.in_memory()
