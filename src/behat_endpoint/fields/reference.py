"""Handlers for fields that point at other entities."""

from typing import Any

from behat_endpoint.exceptions import FieldExpansionError

from .base import BaseFieldHandler


class EntityReferenceHandler(BaseFieldHandler):
    """
    Each value is an id or a label of the target entity type.
    Matching is limited to the field's target bundles when it declares any.
    """

    field_type = "entity_reference"
    default_target_type = "node"

    @property
    def target_type(self) -> str:
        return self.field.setting("target_type") or self.default_target_type

    def expand(self, values: Any) -> list[Any]:
        if self.storage is None:
            raise FieldExpansionError(f"Field {self.field.name} needs storage to resolve references")
        target_type = self.target_type
        bundles = self.field.setting("target_bundles") or None
        items = []
        for value in self._as_list(values):
            if isinstance(value, dict) and "target_id" in value:
                items.append(value)
                continue
            ids = self.storage.find_ids(target_type, value, bundles)
            if not ids:
                raise FieldExpansionError(f"No entity '{value}' of type '{target_type}' exists.")
            items.append({"target_id": ids[0]})
        return items


class TaxonomyTermReferenceHandler(EntityReferenceHandler):
    """Term reference fields: labels are term names."""

    field_type = "taxonomy_term_reference"

    @property
    def target_type(self) -> str:
        return "taxonomy_term"
