"""Handlers for fields restricted to a list of allowed values."""

from typing import Any

from behat_endpoint.exceptions import FieldExpansionError

from .base import BaseFieldHandler


class ListHandlerBase(BaseFieldHandler):
    """
    Values may be given as the stored key or as its human label.
    allowed_values setting maps key -> label.
    """

    def expand(self, values: Any) -> list[Any]:
        allowed = self.field.setting("allowed_values") or {}
        if isinstance(allowed, list):
            allowed = {key: key for key in allowed}
        if not isinstance(allowed, dict):
            raise FieldExpansionError(
                f"allowed_values of field {self.field.name} must be a mapping of key to label"
            )
        by_label = {str(label): key for key, label in allowed.items()}
        items = []
        for value in self._as_list(values):
            key = by_label.get(str(value), value)
            items.append({"value": self._cast(key)})
        return items

    def _cast(self, key: Any) -> Any:
        return key


class ListStringHandler(ListHandlerBase):
    field_type = "list_string"

    def _cast(self, key: Any) -> Any:
        return str(key)


class ListIntegerHandler(ListHandlerBase):
    field_type = "list_integer"

    def _cast(self, key: Any) -> Any:
        try:
            return int(key)
        except (TypeError, ValueError) as e:
            raise FieldExpansionError(f"'{key}' is not an allowed integer for field {self.field.name}") from e


class ListFloatHandler(ListHandlerBase):
    field_type = "list_float"

    def _cast(self, key: Any) -> Any:
        try:
            return float(key)
        except (TypeError, ValueError) as e:
            raise FieldExpansionError(f"'{key}' is not an allowed number for field {self.field.name}") from e
