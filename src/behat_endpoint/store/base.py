"""Abstract base class for entity storage backends."""

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from behat_endpoint.models.entity import Entity, User, get_entity_type_info


class EntityStorage(ABC):
    """
    Persistence and user lookup consumed by the endpoint.
    Backends must implement create, load, delete, id/label lookup and the user directory.
    """

    @abstractmethod
    def create(self, entity_type: str, values: dict[str, Any]) -> Entity:
        """Persist a new entity and return it with its generated id."""
        pass

    @abstractmethod
    def load(self, entity_type: str, entity_id: int) -> Optional[Entity]:
        """Load one entity by id; None when absent."""
        pass

    @abstractmethod
    def delete(self, entity: Entity) -> None:
        """Remove a loaded entity."""
        pass

    @abstractmethod
    def find_ids(self, entity_type: str, value: Any, bundles: Optional[Iterable[str]] = None) -> list[int]:
        """Ids of entities whose id or label equals value, optionally limited to bundles."""
        pass

    @abstractmethod
    def find_user_by_name(self, name: str) -> Optional[User]:
        pass

    @abstractmethod
    def add_user(self, name: str) -> User:
        pass

    def _describe(self, entity_type: str, values: dict[str, Any]) -> tuple[Optional[str], Optional[str]]:
        """Return (bundle, label) from raw values using the entity type's keys."""
        info = get_entity_type_info(entity_type)
        bundle = values.get(info.bundle_key) if info.bundle_key else None
        label = values.get(info.label_key)
        return (
            str(bundle) if bundle is not None else None,
            str(label) if label is not None else None,
        )


def as_entity_id(value: Any) -> Optional[int]:
    """Interpret a reference value as an id, or None if it is not id-like."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return None
