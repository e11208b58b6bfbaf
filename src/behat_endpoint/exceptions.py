"""Errors raised by the endpoint and its field handlers."""


class EndpointError(Exception):
    """Base class for endpoint failures reported back to the caller."""


class UnknownOperation(EndpointError):
    """No handler is registered for the requested operation."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' unknown")


class MalformedPayload(EndpointError):
    """Payload is not valid JSON or does not have the shape the operation needs."""


class FieldExpansionError(EndpointError):
    """A field handler could not turn a raw value into a stored value."""
