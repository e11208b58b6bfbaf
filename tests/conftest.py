"""Pytest fixtures for behat-endpoint tests."""

import pytest

from behat_endpoint.endpoint import BehatEndpoint
from behat_endpoint.schema.registry import SchemaRegistry
from behat_endpoint.store.memory import MemoryBackend


@pytest.fixture
def schema_fields() -> dict:
    """Configurable fields for nodes and terms, as they appear in a config file."""
    return {
        "node": {
            "body": "text_with_summary",
            "field_subtitle": "string",
            "field_tags": {
                "type": "entity_reference",
                "settings": {"target_type": "taxonomy_term", "target_bundles": ["tags"]},
            },
            "field_event_date": {"type": "datetime", "settings": {"datetime_type": "date"}},
            "field_color": {
                "type": "list_string",
                "settings": {"allowed_values": {"r": "Red", "g": "Green"}},
            },
            "field_rating": "fivestar",
        },
        "taxonomy_term": {
            "field_icon": "string",
        },
    }


@pytest.fixture
def schema(schema_fields: dict) -> SchemaRegistry:
    """SchemaRegistry with the sample configurable fields."""
    return SchemaRegistry(schema_fields)


@pytest.fixture
def storage() -> MemoryBackend:
    """Empty in-memory storage."""
    return MemoryBackend()


@pytest.fixture
def endpoint(storage: MemoryBackend, schema: SchemaRegistry) -> BehatEndpoint:
    """Endpoint over in-memory storage and the sample schema."""
    return BehatEndpoint(storage, schema)
