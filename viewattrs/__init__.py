"""Ordered HTML tag attributes with merge semantics and escaped serialization."""

from .attributes import (
    Attributes,
    AttributesError,
    InvalidArgumentError,
    SerializationError,
    is_event_like,
)
from .escaping import escape_html, escape_html_attr

__all__ = [
    "Attributes",
    "AttributesError",
    "InvalidArgumentError",
    "SerializationError",
    "escape_html",
    "escape_html_attr",
    "is_event_like",
]
