"""Default escapers used when a bag is created without explicit ones."""

from __future__ import annotations

import html


def escape_html(text: object) -> str:
    """Escape text placed in element content or used as an attribute name."""

    return html.escape(str(text), quote=True)


def escape_html_attr(text: object) -> str:
    """Escape text placed inside a quoted attribute value."""

    return html.escape(str(text), quote=True)


def identity(text: object) -> str:
    return str(text)


__all__ = ["escape_html", "escape_html_attr", "identity"]
