"""Field handlers and the expansion of raw field values."""

from behat_endpoint.fields.base import BaseFieldHandler
from behat_endpoint.fields.basic import DefaultHandler
from behat_endpoint.fields.expander import FieldExpander
from behat_endpoint.fields.registry import FieldHandlerRegistry

__all__ = ["BaseFieldHandler", "DefaultHandler", "FieldExpander", "FieldHandlerRegistry"]
