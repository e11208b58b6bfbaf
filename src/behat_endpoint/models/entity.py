"""Persisted entities, users and per-type key definitions."""

from typing import Any, Optional

from pydantic import BaseModel, Field


_TRUE_STRINGS = {"1", "true", "yes", "on", "checked"}
_FALSE_STRINGS = {"0", "false", "no", "off", "unchecked", ""}


def parse_flag(value: Any) -> Optional[int]:
    """Read a yes/no value as sent by Behat tables (strings included). None if unrecognized."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return 1 if value else 0
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return 1
    if text in _FALSE_STRINGS:
        return 0
    return None


class EntityTypeInfo(BaseModel):
    """Which value keys hold the id, bundle and label of an entity type."""

    entity_type: str
    id_key: str
    label_key: str
    bundle_key: Optional[str] = None


ENTITY_TYPES: dict[str, EntityTypeInfo] = {
    "node": EntityTypeInfo(entity_type="node", id_key="nid", label_key="title", bundle_key="type"),
    "taxonomy_term": EntityTypeInfo(
        entity_type="taxonomy_term", id_key="tid", label_key="name", bundle_key="vid"
    ),
    "user": EntityTypeInfo(entity_type="user", id_key="uid", label_key="name"),
}


def get_entity_type_info(entity_type: str) -> EntityTypeInfo:
    """Look up key definitions for an entity type."""
    info = ENTITY_TYPES.get(entity_type)
    if info is None:
        raise ValueError(f"Unknown entity type: {entity_type}. Available: {list(ENTITY_TYPES.keys())}")
    return info


class Entity(BaseModel):
    """An entity as stored by a backend."""

    entity_type: str
    id: int
    bundle: Optional[str] = None
    label: Optional[str] = None
    values: dict[str, Any] = Field(default_factory=dict)

    @property
    def published(self) -> bool:
        """Published flag; only meaningful for nodes."""
        return parse_flag(self.values.get("status")) == 1


class User(BaseModel):
    """Account that can be set as a node author."""

    uid: int
    name: str
