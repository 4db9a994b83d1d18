"""Pydantic models for tag documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .attributes import Attributes
from .dom_model import DomContent, DomNode
from .io_utils import read_document


class TagSpec(BaseModel):
    """A single HTML element and its attributes."""

    tag: str = Field(..., description="Element name, e.g. div or input.")
    attributes: Dict[str, Any] = Field(
        default_factory=dict,
        description="Initial attributes. Later keys overwrite earlier ones.",
    )
    merge: List[Dict[str, Any]] = Field(
        default_factory=list,
        description=(
            "Attribute sets merged in order on top of the initial attributes; "
            "values for existing names are appended."
        ),
    )
    text: Optional[str] = Field(None, description="Escaped text content.")
    raw_html: Optional[str] = Field(
        None, alias="rawHtml", description="Trusted HTML inserted without escaping."
    )
    children: List[Union["TagSpec", str]] = Field(
        default_factory=list, description="Nested elements or text nodes."
    )
    self_closing: bool = Field(
        False, alias="selfClosing", description="Render as <tag .../> without children."
    )

    model_config = ConfigDict(populate_by_name=True)

    def build_attributes(self) -> Attributes:
        attrs = Attributes(attribs=self.attributes)
        for attribs in self.merge:
            attrs.merge(attribs)
        return attrs

    def to_dom(self) -> DomNode:
        children: List[DomContent] = [
            child.to_dom() if isinstance(child, TagSpec) else child for child in self.children
        ]
        return DomNode(
            tag=self.tag,
            attrs=self.build_attributes(),
            children=children,
            text=self.text,
            raw_html=self.raw_html,
            self_closing=self.self_closing,
        )


TagSpec.model_rebuild()


class TagDocument(BaseModel):
    """Top-level document listing elements to render."""

    tags: List[TagSpec] = Field(default_factory=list, description="Elements in output order.")


def load_tag_document(path: Path) -> TagDocument:
    data = read_document(path) or {}
    if isinstance(data, list):
        data = {"tags": data}
    if not isinstance(data, dict):
        raise SystemExit(f"{path} must contain a mapping with a 'tags' list or a list of tags.")
    try:
        return TagDocument.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid tag document in {path}: {exc}") from exc


__all__ = ["TagDocument", "TagSpec", "load_tag_document"]
