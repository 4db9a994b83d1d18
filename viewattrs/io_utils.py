"""Utility helpers for JSON/YAML IO and logging."""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any

import yaml

from .errors import SerializationError

_JSON_STRING = re.compile(r'"(?:[^"\\]|\\.)*"')
_HTML_UNSAFE = re.compile(r"\\.|[<>'&]")
_HEX_ESCAPES = {
    "<": "\\u003C",
    ">": "\\u003E",
    "'": "\\u0027",
    "&": "\\u0026",
    '\\"': "\\u0022",
}


def _hex_escape_literal(match: re.Match[str]) -> str:
    body = match.group(0)[1:-1]
    body = _HTML_UNSAFE.sub(lambda m: _HEX_ESCAPES.get(m.group(0), m.group(0)), body)
    return f'"{body}"'


def html_safe_json_dumps(obj: object) -> str:
    """Serialize JSON so it can sit inside an HTML attribute or script block.

    Tag brackets, apostrophes, ampersands and quotes inside string literals are
    written as ``\\uXXXX`` escapes. The quotes delimiting strings are left as
    they are.
    """

    try:
        text = json.dumps(obj, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"Cannot encode {type(obj).__name__} as JSON: {exc}") from exc
    return _JSON_STRING.sub(_hex_escape_literal, text)


def read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def read_yaml(path: Path) -> Any:
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def read_document(path: Path) -> Any:
    """Load a JSON or YAML document depending on the file suffix."""

    if path.suffix.lower() == ".json":
        return read_json(path)
    return read_yaml(path)


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
