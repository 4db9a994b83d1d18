"""Storage and serialization of HTML tag attributes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Callable, Dict, List, Tuple, Union

from .errors import AttributesError, InvalidArgumentError, SerializationError
from .escaping import escape_html, escape_html_attr
from .io_utils import html_safe_json_dumps

Escaper = Callable[[str], str]
AttributeSource = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]

SCALAR_TYPES = (str, int, float, bool)
SEQUENCE_TYPES = (list, tuple)
CONSTRAINTS_KEY = "constraints"


def is_event_like(name: str) -> bool:
    """Return True for event handler names (``on*``) and the ``constraints`` key.

    Non-scalar values of these attributes are JSON encoded instead of being
    joined with spaces.
    """

    return name.startswith("on") or name == CONSTRAINTS_KEY


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, SEQUENCE_TYPES):
        return list(value)
    return [value]


def _to_text(value: Any) -> str:
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    return str(value)


def _iter_pairs(attribs: AttributeSource) -> Iterator[Tuple[str, Any]]:
    if isinstance(attribs, Mapping):
        yield from attribs.items()
        return
    if isinstance(attribs, (str, bytes)):
        raise InvalidArgumentError(f"Expected a mapping or iterable of pairs, got {type(attribs).__name__}")
    try:
        iterator = iter(attribs)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"Expected a mapping or iterable of pairs, got {type(attribs).__name__}"
        ) from exc
    for item in iterator:
        try:
            name, value = item
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(f"Attribute entries must be (name, value) pairs, got {item!r}") from exc
        yield name, value


class Attributes(MutableMapping):
    """Ordered mapping of HTML attribute names to values.

    ``str(attributes)`` renders the attributes as a fragment meant to follow a
    tag name, e.g. ``"<div" + str(attributes) + ">"``.
    """

    def __init__(
        self,
        html_escaper: Escaper = escape_html,
        html_attr_escaper: Escaper = escape_html_attr,
        attribs: AttributeSource = (),
    ) -> None:
        self.html_escaper = html_escaper
        self.html_attr_escaper = html_attr_escaper
        self._entries: Dict[str, Any] = {}
        for name, value in list(_iter_pairs(attribs)):
            self[name] = value

    def __getitem__(self, name: str) -> Any:
        return self._entries[name]

    def __setitem__(self, name: str, value: Any) -> None:
        self._entries[name] = value

    def __delitem__(self, name: str) -> None:
        del self._entries[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._entries!r})"

    def add(self, name: str, value: Any) -> "Attributes":
        """Add a value to an attribute, creating the attribute if needed.

        Adding to an existing attribute turns the stored value into a list
        with the old values first. Two mappings are merged by key instead,
        with later keys winning.
        """

        if name in self._entries:
            stored = self._entries[name]
            if isinstance(stored, Mapping) and isinstance(value, Mapping):
                value = {**stored, **value}
            else:
                value = _as_list(stored) + _as_list(value)
        self._entries[name] = value
        return self

    def merge(self, attribs: AttributeSource) -> "Attributes":
        """Add every pair from ``attribs`` in order."""

        pairs = list(_iter_pairs(attribs))
        for name, value in pairs:
            self.add(name, value)
        return self

    def has_value(self, name: str, value: Any) -> bool:
        """Does the attribute exist and contain ``value``?"""

        if name not in self._entries:
            return False

        stored = self._entries[name]
        if isinstance(stored, Mapping):
            return value in stored.values()
        if isinstance(stored, SEQUENCE_TYPES):
            return value in stored

        return type(value) is type(stored) and value == stored

    def copy(self) -> "Attributes":
        return self.__class__(self.html_escaper, self.html_attr_escaper, self._entries)

    def _render_value(self, key: str, value: Any) -> str:
        event_like = is_event_like(key)
        if event_like and not is_scalar(value):
            # Event handlers and constraints receive structured data as JSON.
            return html_safe_json_dumps(value)
        if not event_like and isinstance(value, Mapping):
            return " ".join(_to_text(item) for item in value.values())
        if not event_like and isinstance(value, SEQUENCE_TYPES):
            return " ".join(_to_text(item) for item in value)
        return _to_text(value)

    def serialize(self) -> str:
        parts: List[str] = []
        for name, value in self._entries.items():
            key = self.html_escaper(name)
            val = self.html_attr_escaper(self._render_value(key, value))
            quote = "'" if '"' in val else '"'
            parts.append(f" {key}={quote}{val}{quote}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.serialize()

    def __html__(self) -> str:
        return self.serialize()


__all__ = [
    "Attributes",
    "AttributesError",
    "InvalidArgumentError",
    "SerializationError",
    "is_event_like",
    "is_scalar",
]
