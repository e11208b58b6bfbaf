"""Behat endpoint: remote operations for BDD test suites against a content store."""

from behat_endpoint.endpoint import BehatEndpoint
from behat_endpoint.exceptions import (
    EndpointError,
    FieldExpansionError,
    MalformedPayload,
    UnknownOperation,
)

__all__ = [
    "BehatEndpoint",
    "EndpointError",
    "FieldExpansionError",
    "MalformedPayload",
    "UnknownOperation",
]
