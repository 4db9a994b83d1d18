"""Exceptions raised by the attribute bag."""


class AttributesError(Exception):
    """Base class for attribute bag errors."""


class InvalidArgumentError(AttributesError, TypeError):
    """Raised when an attribute source is not a mapping or iterable of pairs."""


class SerializationError(AttributesError, ValueError):
    """Raised when an attribute value cannot be encoded as JSON."""


__all__ = ["AttributesError", "InvalidArgumentError", "SerializationError"]
