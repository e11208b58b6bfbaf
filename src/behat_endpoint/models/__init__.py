"""Data models for drafts, persisted entities and field definitions."""

from behat_endpoint.models.draft import EntityDraft, OperationRequest
from behat_endpoint.models.entity import ENTITY_TYPES, Entity, EntityTypeInfo, User, get_entity_type_info
from behat_endpoint.models.field import FieldDefinition

__all__ = [
    "ENTITY_TYPES",
    "Entity",
    "EntityDraft",
    "EntityTypeInfo",
    "FieldDefinition",
    "OperationRequest",
    "User",
    "get_entity_type_info",
]
