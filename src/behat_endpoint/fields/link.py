"""Handler for link fields."""

from typing import Any

from behat_endpoint.exceptions import FieldExpansionError

from .base import BaseFieldHandler


class LinkHandler(BaseFieldHandler):
    """Each value is [title, uri], {"title", "uri"} or a bare uri."""

    field_type = "link"

    def expand(self, values: Any) -> list[Any]:
        # A single [title, uri] pair is one link, not two
        if isinstance(values, list) and len(values) == 2 and all(isinstance(v, str) for v in values):
            values = [values]
        return [self._link(v) for v in self._as_list(values)]

    def _link(self, value: Any) -> dict[str, Any]:
        if isinstance(value, dict):
            title, uri = value.get("title"), value.get("uri")
        elif isinstance(value, list) and len(value) == 2:
            title, uri = value
        elif isinstance(value, str):
            title, uri = None, value
        else:
            raise FieldExpansionError(f"Cannot interpret {value!r} as a link for field {self.field.name}")
        if not uri:
            raise FieldExpansionError(f"Link for field {self.field.name} has no uri")
        return {"title": title, "uri": uri, "options": {}}
