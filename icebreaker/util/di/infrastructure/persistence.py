"""Persistence infrastructure providers."""

from dishka import Scope, provide
import logfire

from icebreaker.config import StorageSettings
from icebreaker.domain.repository import (
    AnswerRepository,
    LikeRepository,
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from icebreaker.persistence.repository import (
    StoreAnswerRepository,
    StoreLikeRepository,
    StoreQuestionRepository,
    StoreTopicRepository,
    StoreUserRepository,
)
from icebreaker.persistence.store import EntityStores
from icebreaker.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Implementations provide the EntityStores. Stores are APP-scoped: each
    store owns the lock that serializes access to its entity type, so one
    instance per entity type must be shared by every request.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using JSON files."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_entity_stores(self, storage: StorageSettings) -> EntityStores:
        """Provide JSON file stores under the configured storage path."""
        logfire.info(
            "Using JSON file storage",
            path=str(storage.path),
            naming_policy=storage.naming_policy,
        )
        return EntityStores.json_files(storage)


class RepositoryProvider(ProviderBase):
    """Repositories over whichever entity stores are provided - concrete."""

    scope = Scope.REQUEST

    @provide
    def get_user_repository(self, stores: EntityStores) -> UserRepository:
        """Provide User repository."""
        return StoreUserRepository(stores.users)

    @provide
    def get_topic_repository(self, stores: EntityStores) -> TopicRepository:
        """Provide Topic repository."""
        return StoreTopicRepository(stores.topics)

    @provide
    def get_question_repository(self, stores: EntityStores) -> QuestionRepository:
        """Provide Question repository."""
        return StoreQuestionRepository(stores.questions)

    @provide
    def get_answer_repository(self, stores: EntityStores) -> AnswerRepository:
        """Provide Answer repository."""
        return StoreAnswerRepository(stores.answers)

    @provide
    def get_like_repository(self, stores: EntityStores) -> LikeRepository:
        """Provide Like repository."""
        return StoreLikeRepository(stores.likes)
