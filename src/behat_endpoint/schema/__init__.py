"""Field schema: which fields each entity type has and their types."""

from behat_endpoint.schema.registry import BASE_FIELDS, SchemaRegistry

__all__ = ["BASE_FIELDS", "SchemaRegistry"]
