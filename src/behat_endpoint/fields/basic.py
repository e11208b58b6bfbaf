"""Handlers for plain value fields: default, text and boolean."""

from typing import Any

from behat_endpoint.exceptions import FieldExpansionError
from behat_endpoint.models.entity import parse_flag

from .base import BaseFieldHandler


class DefaultHandler(BaseFieldHandler):
    """Fallback for field types without a dedicated handler: values pass through."""

    field_type = "default"

    def expand(self, values: Any) -> list[Any]:
        return list(self._as_list(values))


class TextHandler(BaseFieldHandler):
    """string / text fields: each value becomes {"value": ...}."""

    field_type = "text"

    def expand(self, values: Any) -> list[Any]:
        items = []
        for value in self._as_list(values):
            if isinstance(value, dict):
                items.append(value)
            else:
                items.append({"value": value})
        return items


class TextWithSummaryHandler(BaseFieldHandler):
    """Body-style text: a plain value, or an object with value and summary."""

    field_type = "text_with_summary"

    def expand(self, values: Any) -> list[Any]:
        items = []
        for value in self._as_list(values):
            if isinstance(value, dict):
                item = {"value": value.get("value", "")}
                if value.get("summary") is not None:
                    item["summary"] = value["summary"]
                if value.get("format") is not None:
                    item["format"] = value["format"]
                items.append(item)
            else:
                items.append({"value": value})
        return items


class BooleanHandler(BaseFieldHandler):
    """Checkbox fields: yes/no style strings and numbers map to 0/1."""

    field_type = "boolean"

    def expand(self, values: Any) -> list[Any]:
        return [{"value": self._to_flag(v)} for v in self._as_list(values)]

    def _to_flag(self, value: Any) -> int:
        flag = parse_flag(value)
        if flag is None or value is None:
            raise FieldExpansionError(
                f"Cannot interpret '{value}' as a boolean for field {self.field.name}"
            )
        return flag
