"""Dispatcher that routes a Behat operation and its JSON payload to a handler."""

import json
import logging
from typing import Any, Callable, Optional

from behat_endpoint.exceptions import MalformedPayload, UnknownOperation
from behat_endpoint.fields.expander import FieldExpander
from behat_endpoint.fields.registry import FieldHandlerRegistry
from behat_endpoint.models.draft import EntityDraft, OperationRequest
from behat_endpoint.models.entity import Entity
from behat_endpoint.schema.registry import SchemaRegistry
from behat_endpoint.store.base import EntityStorage

logger = logging.getLogger(__name__)

OperationFn = Callable[[Any], Any]


class BehatEndpoint:
    """
    Entry point for Behat to make remote calls into the site under test.

    Usage:
        endpoint.execute("create-node", '{"title": "Example page", "type": "page"}')
    """

    def __init__(
        self,
        storage: EntityStorage,
        schema: Optional[SchemaRegistry] = None,
        handlers: Optional[FieldHandlerRegistry] = None,
    ):
        self.storage = storage
        self.schema = schema or SchemaRegistry()
        self.expander = FieldExpander(self.schema, handlers, storage)
        self._operations: dict[str, OperationFn] = {
            "create_node": self.create_node,
            "delete_node": self.delete_node,
            "create_taxonomy_term": self.create_taxonomy_term,
            "delete_taxonomy_term": self.delete_taxonomy_term,
            "is_field": self.is_field,
        }

    def operations(self) -> list[str]:
        """Supported operation names, as the caller spells them."""
        return [name.replace("_", "-") for name in self._operations]

    def execute(self, operation: str, payload: str) -> Any:
        """Decode payload, dispatch to the operation and return its result unmodified."""
        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            raise MalformedPayload(f"Operation data for '{operation}' is not valid JSON: {e}") from e
        return self.dispatch(OperationRequest(operation=operation, payload=data))

    def dispatch(self, request: OperationRequest) -> Any:
        """Run an already-decoded request."""
        fn = self._operations.get(request.handler_name)
        if fn is None:
            raise UnknownOperation(request.operation)
        logger.debug("Dispatching %s", request.operation)
        return fn(request.payload)

    def create_node(self, payload: Any) -> dict[str, Any]:
        """Create a node. Published unless status is given; author is a user name."""
        node = EntityDraft.from_payload("node", payload)
        if not node.has("status"):
            node.set("status", True)

        author = node.get_str("author")
        node.pop("author")
        if author is not None:
            user = self.storage.find_user_by_name(author)
            if user:
                node.set("uid", user.uid)
            else:
                logger.warning("Author %s not found; creating node without author", author)

        self.expander.expand("node", node)

        entity = self.storage.create("node", node.to_dict())
        node.set("nid", entity.id)
        logger.info("Created node %d (%s)", entity.id, entity.label)
        return node.to_dict()

    def delete_node(self, payload: Any) -> None:
        """Delete a node by loaded entity or by nid; absent nodes are ignored."""
        self._delete("node", "nid", payload)

    def create_taxonomy_term(self, payload: Any) -> dict[str, Any]:
        """Create a term in the vocabulary named by vocabulary_machine_name."""
        term = EntityDraft.from_payload("taxonomy_term", payload)
        vocabulary = term.get_str("vocabulary_machine_name")
        if vocabulary is not None:
            term.set("vid", vocabulary)

        self.expander.expand("taxonomy_term", term)

        entity = self.storage.create("taxonomy_term", term.to_dict())
        term.set("tid", entity.id)
        logger.info("Created taxonomy term %d (%s) in %s", entity.id, entity.label, entity.bundle)
        return term.to_dict()

    def delete_taxonomy_term(self, payload: Any) -> None:
        """Delete a term by loaded entity or by tid; absent terms are ignored."""
        self._delete("taxonomy_term", "tid", payload)

    def is_field(self, payload: Any) -> bool:
        """Whether [entity_type, field_name] names a configurable field."""
        if not isinstance(payload, list) or len(payload) != 2:
            raise MalformedPayload("is-field expects [entity_type, field_name]")
        entity_type, field_name = payload
        return self.schema.is_field(str(entity_type), str(field_name))

    def _delete(self, entity_type: str, id_key: str, payload: Any) -> None:
        if isinstance(payload, Entity) and payload.entity_type == entity_type:
            entity: Optional[Entity] = payload
        else:
            entity_id = EntityDraft.from_payload(entity_type, payload).get_int(id_key)
            if entity_id is None:
                raise MalformedPayload(f"Deleting a {entity_type} requires '{id_key}'")
            entity = self.storage.load(entity_type, entity_id)
        if entity is None:
            logger.debug("%s already absent, nothing to delete", entity_type)
            return
        self.storage.delete(entity)
        logger.info("Deleted %s %d", entity_type, entity.id)
