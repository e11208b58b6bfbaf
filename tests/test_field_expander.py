"""Unit tests for FieldExpander."""

from unittest.mock import MagicMock

from behat_endpoint.fields.expander import FieldExpander
from behat_endpoint.fields.registry import FieldHandlerRegistry
from behat_endpoint.fields.reference import EntityReferenceHandler
from behat_endpoint.models.draft import EntityDraft
from behat_endpoint.models.field import FieldDefinition
from behat_endpoint.schema.registry import SchemaRegistry
from behat_endpoint.store.memory import MemoryBackend


class TestFieldExpander:
    """Tests for FieldExpander.expand."""

    def test_reference_value_uses_handler_output(self) -> None:
        """A present reference field becomes exactly what its handler produces."""
        storage = MemoryBackend()
        for name in ("a", "b", "c"):
            storage.create("taxonomy_term", {"name": name, "vid": "tags"})
        schema = SchemaRegistry({"node": {"tags": {"type": "entity_reference", "settings": {"target_type": "taxonomy_term"}}}})
        draft = EntityDraft(entity_type="node", values={"tags": "3"})

        FieldExpander(schema, storage=storage).expand("node", draft)

        field = FieldDefinition(name="tags", type="entity_reference", settings={"target_type": "taxonomy_term"})
        assert draft.get("tags") == EntityReferenceHandler(field, "node", storage).expand("3")
        assert draft.get("tags") == [{"target_id": 3}]

    def test_absent_field_untouched(self) -> None:
        """Registry fields missing from the draft are not added."""
        schema = SchemaRegistry({"node": {"tags": "entity_reference", "body": "text"}})
        draft = EntityDraft(entity_type="node", values={"body": "x"})
        FieldExpander(schema).expand("node", draft)
        assert draft.values == {"body": [{"value": "x"}]}

    def test_null_field_skipped(self) -> None:
        """A null value counts as unset."""
        handlers = MagicMock(spec=FieldHandlerRegistry)
        schema = SchemaRegistry({"node": {"body": "text"}})
        draft = EntityDraft(entity_type="node", values={"body": None})
        FieldExpander(schema, handlers).expand("node", draft)
        handlers.create.assert_not_called()
        assert draft.values == {"body": None}

    def test_base_fields_not_expanded(self) -> None:
        """Base fields keep their raw values."""
        draft = EntityDraft(entity_type="node", values={"title": "T", "status": True})
        FieldExpander(SchemaRegistry()).expand("node", draft)
        assert draft.values == {"title": "T", "status": True}

    def test_unknown_type_uses_default(self) -> None:
        """Fields of unhandled types pass through as a list."""
        schema = SchemaRegistry({"node": {"field_rating": "fivestar"}})
        draft = EntityDraft(entity_type="node", values={"field_rating": 80})
        FieldExpander(schema).expand("node", draft)
        assert draft.get("field_rating") == [80]
