"""Endpoint configuration: storage backend, field schema and seeded users."""

from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field

from behat_endpoint.schema.registry import SchemaRegistry
from behat_endpoint.store.base import EntityStorage
from behat_endpoint.store.memory import MemoryBackend
from behat_endpoint.store.sqlite_store import SqliteBackend

DEFAULT_CONFIG_PATH = Path("behat_endpoint.yaml")


class EndpointConfig(BaseModel):
    """Settings for building an endpoint."""

    backend: Literal["sqlite", "memory"] = "sqlite"
    database: Path = Field(default=Path("behat_endpoint.db"), description="SQLite database path")
    entity_types: dict[str, Any] = Field(
        default_factory=dict,
        description="entity_type -> {fields: {name: type or {type, settings}}}",
    )
    users: list[str] = Field(default_factory=list, description="User names seeded into the directory")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "EndpointConfig":
        """Load config from YAML. A missing file yields defaults."""
        path = Path(path)
        if not path.exists():
            return cls()
        data = yaml.safe_load(path.read_text()) or {}
        return cls.model_validate(data)

    def build_schema(self) -> SchemaRegistry:
        return SchemaRegistry.from_config(self.entity_types)

    def build_storage(self, database: Optional[Path] = None) -> EntityStorage:
        """Create the storage backend and seed configured users."""
        storage: EntityStorage
        if self.backend == "memory":
            storage = MemoryBackend()
        else:
            storage = SqliteBackend(database or self.database)
        for name in self.users:
            storage.add_user(name)
        return storage
