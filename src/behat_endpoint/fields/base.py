"""Abstract base class for field handlers."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from behat_endpoint.models.field import FieldDefinition
from behat_endpoint.store.base import EntityStorage


class BaseFieldHandler(ABC):
    """
    Turns loosely-typed test input for one field into the list of item
    records the storage layer keeps. A scalar is treated as a one-item list.
    """

    field_type: str = ""

    def __init__(
        self,
        field: FieldDefinition,
        entity_type: str,
        storage: Optional[EntityStorage] = None,
    ):
        self.field = field
        self.entity_type = entity_type
        self.storage = storage

    @abstractmethod
    def expand(self, values: Any) -> list[Any]:
        """Return the structured items for a raw field value."""
        pass

    @staticmethod
    def _as_list(values: Any) -> list[Any]:
        if isinstance(values, list):
            return values
        return [values]
