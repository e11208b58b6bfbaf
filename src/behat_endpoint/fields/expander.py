"""Rewrites raw draft values of configurable fields into stored item records."""

import logging
from typing import Optional

from behat_endpoint.models.draft import EntityDraft
from behat_endpoint.schema.registry import SchemaRegistry
from behat_endpoint.store.base import EntityStorage

from .registry import FieldHandlerRegistry

logger = logging.getLogger(__name__)


class FieldExpander:
    """Runs each configurable field present on a draft through its type's handler."""

    def __init__(
        self,
        schema: SchemaRegistry,
        handlers: Optional[FieldHandlerRegistry] = None,
        storage: Optional[EntityStorage] = None,
    ):
        self.schema = schema
        self.handlers = handlers or FieldHandlerRegistry()
        self.storage = storage

    def expand(self, entity_type: str, draft: EntityDraft) -> None:
        """Expand draft values in place. Fields the draft does not set are left alone."""
        definitions = self.schema.field_storage_definitions(entity_type)
        for field_name in self.schema.field_types(entity_type):
            if not draft.has(field_name):
                continue
            handler = self.handlers.create(definitions[field_name], entity_type, self.storage)
            draft.set(field_name, handler.expand(draft.get(field_name)))
            logger.debug("Expanded %s.%s with %s", entity_type, field_name, type(handler).__name__)
