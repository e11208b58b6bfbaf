"""In-process entity storage, used for tests and throwaway runs."""

import copy
from typing import Any, Iterable, Optional

from behat_endpoint.models.entity import Entity, User, get_entity_type_info

from .base import EntityStorage, as_entity_id


class MemoryBackend(EntityStorage):
    """Keeps entities in dicts keyed by (entity_type, id). Ids count up per entity type."""

    def __init__(self) -> None:
        self._entities: dict[tuple[str, int], Entity] = {}
        self._next_id: dict[str, int] = {}
        self._users: dict[str, User] = {}

    def create(self, entity_type: str, values: dict[str, Any]) -> Entity:
        info = get_entity_type_info(entity_type)
        entity_id = self._next_id.get(entity_type, 1)
        self._next_id[entity_type] = entity_id + 1
        bundle, label = self._describe(entity_type, values)
        stored = copy.deepcopy(values)
        stored[info.id_key] = entity_id
        entity = Entity(entity_type=entity_type, id=entity_id, bundle=bundle, label=label, values=stored)
        self._entities[(entity_type, entity_id)] = entity
        return entity.model_copy(deep=True)

    def load(self, entity_type: str, entity_id: int) -> Optional[Entity]:
        entity = self._entities.get((entity_type, entity_id))
        return entity.model_copy(deep=True) if entity else None

    def delete(self, entity: Entity) -> None:
        self._entities.pop((entity.entity_type, entity.id), None)

    def find_ids(self, entity_type: str, value: Any, bundles: Optional[Iterable[str]] = None) -> list[int]:
        if entity_type == "user":
            return self._find_user_ids(value)
        wanted_id = as_entity_id(value)
        allowed = set(bundles) if bundles else None
        ids = []
        for (etype, entity_id), entity in self._entities.items():
            if etype != entity_type:
                continue
            if allowed is not None and entity.bundle not in allowed:
                continue
            if entity_id == wanted_id or entity.label == str(value):
                ids.append(entity_id)
        return sorted(ids)

    def _find_user_ids(self, value: Any) -> list[int]:
        wanted_id = as_entity_id(value)
        return sorted(u.uid for u in self._users.values() if u.uid == wanted_id or u.name == str(value))

    def find_user_by_name(self, name: str) -> Optional[User]:
        return self._users.get(name)

    def add_user(self, name: str) -> User:
        existing = self._users.get(name)
        if existing:
            return existing
        user = User(uid=len(self._users) + 1, name=name)
        self._users[name] = user
        return user
