"""Entity storage backends."""

from behat_endpoint.store.base import EntityStorage
from behat_endpoint.store.memory import MemoryBackend
from behat_endpoint.store.sqlite_store import SqliteBackend

__all__ = ["EntityStorage", "MemoryBackend", "SqliteBackend"]
