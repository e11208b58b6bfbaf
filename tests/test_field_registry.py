"""Unit tests for FieldHandlerRegistry."""

from typing import Any

from behat_endpoint.fields.base import BaseFieldHandler
from behat_endpoint.fields.basic import DefaultHandler, TextHandler
from behat_endpoint.fields.reference import EntityReferenceHandler
from behat_endpoint.fields.registry import FieldHandlerRegistry
from behat_endpoint.models.field import FieldDefinition


class UppercaseHandler(BaseFieldHandler):
    field_type = "shout"

    def expand(self, values: Any) -> list[Any]:
        return [{"value": str(v).upper()} for v in self._as_list(values)]


class TestFieldHandlerRegistry:
    """Tests for FieldHandlerRegistry."""

    def test_known_type(self) -> None:
        """Registered types return their handler."""
        registry = FieldHandlerRegistry()
        assert registry.get("entity_reference") is EntityReferenceHandler
        assert registry.get("text_long") is TextHandler

    def test_unknown_type_falls_back(self) -> None:
        """Unregistered types get DefaultHandler."""
        assert FieldHandlerRegistry().get("fivestar") is DefaultHandler

    def test_register_adds_handler(self) -> None:
        """register makes a new type resolvable."""
        registry = FieldHandlerRegistry()
        registry.register("shout", UppercaseHandler)
        handler = registry.create(FieldDefinition(name="field_x", type="shout"), "node")
        assert handler.expand("hi") == [{"value": "HI"}]
        assert "shout" in registry.available_types()

    def test_register_is_per_instance(self) -> None:
        """Registering on one registry leaves others untouched."""
        FieldHandlerRegistry().register("shout", UppercaseHandler)
        assert FieldHandlerRegistry().get("shout") is DefaultHandler

    def test_create_passes_context(self) -> None:
        """create hands the field, entity type and storage to the handler."""
        field = FieldDefinition(name="field_tags", type="entity_reference")
        storage = object()
        handler = FieldHandlerRegistry().create(field, "node", storage)  # type: ignore[arg-type]
        assert handler.field is field
        assert handler.entity_type == "node"
        assert handler.storage is storage
