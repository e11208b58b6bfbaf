"""Registry mapping field type names to handler classes."""

import logging
from typing import Optional, Type

from behat_endpoint.models.field import FieldDefinition
from behat_endpoint.store.base import EntityStorage

from .base import BaseFieldHandler
from .basic import BooleanHandler, DefaultHandler, TextHandler, TextWithSummaryHandler
from .dates import DatetimeHandler
from .link import LinkHandler
from .lists import ListFloatHandler, ListIntegerHandler, ListStringHandler
from .reference import EntityReferenceHandler, TaxonomyTermReferenceHandler

logger = logging.getLogger(__name__)


class FieldHandlerRegistry:
    """
    Provides the handler for a field type. Types with no registered handler
    get DefaultHandler, so lookup never fails.
    """

    default_handler: Type[BaseFieldHandler] = DefaultHandler

    _builtin: dict[str, Type[BaseFieldHandler]] = {
        "boolean": BooleanHandler,
        "datetime": DatetimeHandler,
        "entity_reference": EntityReferenceHandler,
        "link": LinkHandler,
        "list_float": ListFloatHandler,
        "list_integer": ListIntegerHandler,
        "list_string": ListStringHandler,
        "string": TextHandler,
        "string_long": TextHandler,
        "taxonomy_term_reference": TaxonomyTermReferenceHandler,
        "text": TextHandler,
        "text_long": TextHandler,
        "text_with_summary": TextWithSummaryHandler,
    }

    def __init__(self) -> None:
        self._handlers: dict[str, Type[BaseFieldHandler]] = dict(self._builtin)

    def register(self, type_name: str, handler_cls: Type[BaseFieldHandler]) -> None:
        """Add or replace the handler for a field type."""
        self._handlers[type_name] = handler_cls

    def get(self, type_name: str) -> Type[BaseFieldHandler]:
        """Handler class for a field type, falling back to the default handler."""
        handler_cls = self._handlers.get(type_name)
        if handler_cls is None:
            logger.debug("No handler for field type %s, using %s", type_name, self.default_handler.__name__)
            return self.default_handler
        return handler_cls

    def create(
        self,
        field: FieldDefinition,
        entity_type: str,
        storage: Optional[EntityStorage] = None,
    ) -> BaseFieldHandler:
        """Instantiate the handler for a field definition."""
        return self.get(field.type)(field, entity_type, storage)

    def available_types(self) -> list[str]:
        """Return field types with a dedicated handler."""
        return sorted(self._handlers.keys())
