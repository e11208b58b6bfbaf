"""Loosely-typed entity values decoded from an operation payload."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from behat_endpoint.exceptions import MalformedPayload


class OperationRequest(BaseModel):
    """One call into the endpoint: operation name and decoded payload."""

    operation: str
    payload: Any = None

    @property
    def handler_name(self) -> str:
        """Operation name as registered in the dispatch table, e.g. create_node."""
        return self.operation.replace("-", "_")


class EntityDraft(BaseModel):
    """
    Field name -> raw JSON value for one entity about to be created.
    Mutated in place by the operation and the field expander, then handed to storage.
    A key holding null counts as unset.
    """

    entity_type: str
    values: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_payload(cls, entity_type: str, payload: Any) -> "EntityDraft":
        """Build a draft from a decoded JSON object."""
        if not isinstance(payload, dict):
            raise MalformedPayload(
                f"Expected a JSON object for {entity_type}, got {type(payload).__name__}"
            )
        return cls(entity_type=entity_type, values=dict(payload))

    def has(self, name: str) -> bool:
        return self.values.get(name) is not None

    def get(self, name: str, default: Any = None) -> Any:
        value = self.values.get(name)
        return default if value is None else value

    def set(self, name: str, value: Any) -> None:
        self.values[name] = value

    def pop(self, name: str) -> Any:
        return self.values.pop(name, None)

    def get_str(self, name: str) -> Optional[str]:
        """Return a string value, None if unset; anything else is a malformed payload."""
        value = self.values.get(name)
        if value is None:
            return None
        if not isinstance(value, str):
            raise MalformedPayload(f"Field '{name}' must be a string, got {type(value).__name__}")
        return value

    def get_int(self, name: str) -> Optional[int]:
        """Return an integer id, accepting digit strings as sent by the test driver."""
        value = self.values.get(name)
        if value is None:
            return None
        if isinstance(value, bool):
            raise MalformedPayload(f"Field '{name}' must be an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        raise MalformedPayload(f"Field '{name}' must be an integer, got {value!r}")

    def to_dict(self) -> dict[str, Any]:
        return dict(self.values)
