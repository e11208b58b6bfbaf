"""Field storage definitions."""

from typing import Any

from pydantic import BaseModel, Field


class FieldDefinition(BaseModel):
    """
    Storage definition of one field on an entity type.
    Base fields (title, status, ...) are not configurable; fields added by
    site configuration are.
    """

    name: str
    type: str
    configurable: bool = True
    settings: dict[str, Any] = Field(default_factory=dict)

    def setting(self, key: str, default: Any = None) -> Any:
        return self.settings.get(key, default)
