"""Rendering helpers: tag documents and Jinja templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from .attributes import Attributes
from .dom_model import dom_to_html
from .escaping import escape_html, escape_html_attr
from .models import TagDocument


@dataclass
class RenderContext:
    """Escapers and template locations shared by a rendering pass."""

    template_dirs: List[Path] = field(default_factory=list)
    html_escaper: Callable[[str], str] = escape_html
    html_attr_escaper: Callable[[str], str] = escape_html_attr

    def attributes(self, attribs: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Attributes:
        """Build a bag from a mapping and/or keyword arguments.

        Keyword names use ``_`` in place of ``-`` so ``data_id`` becomes
        ``data-id``; a trailing ``_`` is dropped so ``class_`` becomes ``class``.
        """

        attrs = Attributes(self.html_escaper, self.html_attr_escaper, attribs or {})
        for name, value in kwargs.items():
            attrs[name.rstrip("_").replace("_", "-")] = value
        return attrs

    def jinja_env(self) -> Environment:
        """Create a Jinja environment exposing the attribute helpers."""

        env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            autoescape=select_autoescape(["html", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        env.globals["html_attributes"] = self.attributes
        env.filters["attributes"] = self.attributes
        return env


def render_template(ctx: RenderContext, template_name: str, context: Dict[str, Any]) -> str:
    env = ctx.jinja_env()
    template = env.get_template(template_name)
    return template.render(**context)


def render_tag_document(document: TagDocument) -> str:
    """Render every tag in the document, one element per line."""

    lines: Sequence[str] = [dom_to_html([spec.to_dom()]) for spec in document.tags]
    return "\n".join(lines) + "\n" if lines else ""


__all__ = ["RenderContext", "render_tag_document", "render_template"]
