"""Simple DOM model for HTML serialization."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Sequence

from .attributes import Attributes


@dataclass
class DomNode:
    tag: str
    attrs: Mapping[str, Any] = field(default_factory=dict)
    children: List["DomContent"] = field(default_factory=list)
    text: str | None = None
    raw_html: str | None = None
    self_closing: bool = False

    def attributes(self) -> Attributes:
        if isinstance(self.attrs, Attributes):
            return self.attrs
        return Attributes(attribs=self.attrs)


DomContent = DomNode | str


def _render_children(children: Sequence[DomContent], escaper: Callable[[str], str]) -> str:
    html_parts: List[str] = []
    for child in children:
        if isinstance(child, DomNode):
            html_parts.append(dom_to_html([child]))
        else:
            html_parts.append(escaper(str(child)))
    return "".join(html_parts)


def dom_to_html(dom: Sequence[DomNode]) -> str:
    parts: List[str] = []
    for node in dom:
        bag = node.attributes()
        attrs = str(bag)
        if node.self_closing:
            parts.append(f"<{node.tag}{attrs}/>")
            continue
        parts.append(f"<{node.tag}{attrs}>")
        if node.raw_html is not None:
            # Raw HTML insertion assumes content is trusted.
            parts.append(node.raw_html)
        elif node.text is not None:
            parts.append(bag.html_escaper(node.text))
        if node.children:
            parts.append(_render_children(node.children, bag.html_escaper))
        parts.append(f"</{node.tag}>")
    return "".join(parts)


__all__ = ["DomContent", "DomNode", "dom_to_html"]
