"""Field storage definitions per entity type, and the configurable-field view of them."""

from pathlib import Path
from typing import Any

import yaml

from behat_endpoint.models.field import FieldDefinition

# Fields every entity of the type has; never reported as configurable
BASE_FIELDS: dict[str, dict[str, str]] = {
    "node": {
        "nid": "integer",
        "type": "entity_reference",
        "title": "string",
        "status": "boolean",
        "uid": "entity_reference",
        "created": "created",
    },
    "taxonomy_term": {
        "tid": "integer",
        "vid": "entity_reference",
        "name": "string",
        "description": "text_long",
        "weight": "integer",
        "parent": "entity_reference",
    },
    "user": {
        "uid": "integer",
        "name": "string",
    },
}


class SchemaRegistry:
    """
    Holds field storage definitions for each entity type.
    Lookups are derived from the definitions on every call; nothing is cached.
    """

    def __init__(self, fields: dict[str, dict[str, Any]] | None = None):
        self._definitions: dict[str, dict[str, FieldDefinition]] = {}
        for entity_type, base in BASE_FIELDS.items():
            self._definitions[entity_type] = {
                name: FieldDefinition(name=name, type=type_name, configurable=False)
                for name, type_name in base.items()
            }
        for entity_type, entity_fields in (fields or {}).items():
            for name, spec in (entity_fields or {}).items():
                self.add_field(entity_type, name, spec)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "SchemaRegistry":
        """
        Load from YAML: either top-level entity types or nested under entity_types,
        each with a fields mapping.
        """
        data = yaml.safe_load(Path(path).read_text()) or {}
        return cls.from_config(data.get("entity_types", data))

    @classmethod
    def from_config(cls, entity_types: dict[str, Any]) -> "SchemaRegistry":
        """Build from {entity_type: {fields: {name: spec}}}."""
        fields = {
            entity_type: (section or {}).get("fields", {})
            for entity_type, section in (entity_types or {}).items()
        }
        return cls(fields)

    def add_field(self, entity_type: str, name: str, spec: str | dict[str, Any]) -> FieldDefinition:
        """Add a configurable field. spec is a type name or {type, settings}."""
        if isinstance(spec, str):
            spec = {"type": spec}
        if "type" not in spec:
            raise ValueError(f"Field {entity_type}.{name} has no type")
        definition = FieldDefinition(
            name=name,
            type=spec["type"],
            configurable=spec.get("configurable", True),
            settings=spec.get("settings") or {},
        )
        self._definitions.setdefault(entity_type, {})[name] = definition
        return definition

    def field_storage_definitions(self, entity_type: str) -> dict[str, FieldDefinition]:
        """All field definitions (base and configurable) for an entity type."""
        return dict(self._definitions.get(entity_type, {}))

    def field_types(self, entity_type: str) -> dict[str, str]:
        """Configurable field name -> field type name."""
        return {
            name: definition.type
            for name, definition in self.field_storage_definitions(entity_type).items()
            if definition.configurable
        }

    def is_field(self, entity_type: str, field_name: str) -> bool:
        """True only for a configurable field present on the entity type."""
        return field_name in self.field_types(entity_type)

    def get_field(self, entity_type: str, field_name: str) -> FieldDefinition | None:
        return self._definitions.get(entity_type, {}).get(field_name)
