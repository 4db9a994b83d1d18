"""Command-line interface for viewattrs."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Iterable, Optional, Tuple

from .attributes import Attributes
from .build import RenderContext, render_tag_document, render_template
from .errors import AttributesError
from .io_utils import read_document, warn
from .models import load_tag_document


def _split_pair(raw: str) -> Tuple[str, str]:
    name, sep, value = raw.partition("=")
    if not sep or not name:
        raise SystemExit(f"Expected NAME=VALUE, got {raw!r}")
    return name, value


def _parse_json_pair(raw: str) -> Tuple[str, Any]:
    name, value = _split_pair(raw)
    try:
        return name, json.loads(value)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON for attribute {name!r}: {exc}") from exc


def _write_output(content: str, out: Optional[Path]) -> None:
    if out is None:
        print(content, end="")
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    print(f"Wrote {out}")


def _handle_attrs(args: argparse.Namespace) -> None:
    attrs = Attributes()
    for raw in args.attr or []:
        attrs.add(*_split_pair(raw))
    for raw in args.json or []:
        attrs.add(*_parse_json_pair(raw))

    try:
        fragment = str(attrs)
    except AttributesError as exc:
        raise SystemExit(str(exc)) from exc

    if args.tag:
        print(f"<{args.tag}{fragment}>")
    else:
        print(fragment)


def _handle_render(args: argparse.Namespace) -> None:
    document = load_tag_document(args.document)
    if not document.tags:
        warn(f"No tags found in {args.document}")
    try:
        html = render_tag_document(document)
    except AttributesError as exc:
        raise SystemExit(f"Failed to render {args.document}: {exc}") from exc
    _write_output(html, args.out)


def _handle_template(args: argparse.Namespace) -> None:
    context: Any = {}
    if args.context:
        context = read_document(args.context) or {}
        if not isinstance(context, dict):
            raise SystemExit(f"{args.context} must contain a mapping of template variables.")

    template_dirs = [args.template.parent, *(args.templates or [])]
    ctx = RenderContext(template_dirs=template_dirs)
    try:
        html = render_template(ctx, args.template.name, context)
    except AttributesError as exc:
        raise SystemExit(f"Failed to render {args.template}: {exc}") from exc
    _write_output(html, args.out)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render escaped HTML tag attributes.")
    subparsers = parser.add_subparsers(dest="command")

    attrs_parser = subparsers.add_parser(
        "attrs",
        help="Print an attribute fragment.",
        description="Build attributes from NAME=VALUE pairs and print the escaped fragment.",
    )
    attrs_parser.add_argument(
        "--attr",
        action="append",
        metavar="NAME=VALUE",
        help="Attribute value (repeatable; repeated names are appended).",
    )
    attrs_parser.add_argument(
        "--json",
        action="append",
        metavar="NAME=JSON",
        help="Attribute whose value is parsed as JSON (repeatable).",
    )
    attrs_parser.add_argument("--tag", default=None, help="Wrap the fragment in an opening tag.")
    attrs_parser.set_defaults(func=_handle_attrs)

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML or JSON tag document.",
        description="Validate a tag document and render its elements as HTML.",
    )
    render_parser.add_argument("document", type=Path, help="Path to the tag document.")
    render_parser.add_argument("--out", type=Path, default=None, help="Output file (default: stdout).")
    render_parser.set_defaults(func=_handle_render)

    template_parser = subparsers.add_parser(
        "template",
        help="Render a Jinja template.",
        description="Render a Jinja template with the html_attributes helper available.",
    )
    template_parser.add_argument("template", type=Path, help="Path to the template file.")
    template_parser.add_argument(
        "--context", type=Path, default=None, help="YAML or JSON file with template variables."
    )
    template_parser.add_argument(
        "--templates",
        type=Path,
        action="append",
        help="Additional template directory for includes (repeatable).",
    )
    template_parser.add_argument("--out", type=Path, default=None, help="Output file (default: stdout).")
    template_parser.set_defaults(func=_handle_template)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
