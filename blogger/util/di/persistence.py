"""Persistence DI providers."""

from dishka import Scope, provide
import logfire

from blogger.config import StorageSettings
from blogger.domain.model import Author, Post, Tag
from blogger.persistence import Store, Table
from blogger.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """Persistence component base.

    Subclasses provide the Store; the per-kind tables are taken from it so
    every consumer in a container shares the same in-memory state.
    """

    __mock_component__ = "persistence"

    @provide(scope=Scope.APP)
    def get_post_table(self, store: Store) -> Table[Post]:
        """Provide posts table."""
        return store.posts

    @provide(scope=Scope.APP)
    def get_tag_table(self, store: Store) -> Table[Tag]:
        """Provide tags table."""
        return store.tags

    @provide(scope=Scope.APP)
    def get_author_table(self, store: Store) -> Table[Author]:
        """Provide authors table."""
        return store.authors


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider rooted at the configured directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_store(self, storage_settings: StorageSettings) -> Store:
        """Provide store."""
        store = Store.from_settings(storage_settings)
        logfire.info("Store created", root=str(store.root))
        return store
