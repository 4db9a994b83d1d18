from pathlib import Path

import pytest
from jinja2 import UndefinedError

from viewattrs.build import RenderContext, render_template
from viewattrs.escaping import identity


def _write(templates_dir: Path, name: str, content: str) -> None:
    templates_dir.mkdir(parents=True, exist_ok=True)
    (templates_dir / name).write_text(content, encoding="utf-8")


def test_html_attributes_global_is_not_double_escaped(tmp_path: Path) -> None:
    _write(
        tmp_path,
        "tag.html",
        '<div{{ html_attributes(id=id, class_=classes, data_role="main") }}>{{ label }}</div>',
    )
    ctx = RenderContext(template_dirs=[tmp_path])

    html = render_template(ctx, "tag.html", {"id": "x", "classes": ["a", "b"], "label": "<b>"})
    assert html == '<div id="x" class="a b" data-role="main">&lt;b&gt;</div>'


def test_attributes_filter_encodes_events(tmp_path: Path) -> None:
    _write(tmp_path, "input.jinja", "<input{{ attrs|attributes }}>")
    ctx = RenderContext(template_dirs=[tmp_path])

    html = render_template(ctx, "input.jinja", {"attrs": {"onclick": ["go"], "value": "<x>"}})
    assert html == '<input onclick="[&quot;go&quot;]" value="&lt;x&gt;">'


def test_context_escapers_are_used(tmp_path: Path) -> None:
    _write(tmp_path, "raw.html", "<p{{ html_attributes(title=title) }}></p>")
    ctx = RenderContext(template_dirs=[tmp_path], html_escaper=identity, html_attr_escaper=identity)

    html = render_template(ctx, "raw.html", {"title": 'say "hi"'})
    assert html == "<p title='say \"hi\"'></p>"


def test_missing_variables_fail(tmp_path: Path) -> None:
    _write(tmp_path, "strict.html", "<p{{ html_attributes(id=missing_value) }}></p>")
    ctx = RenderContext(template_dirs=[tmp_path])

    with pytest.raises(UndefinedError):
        render_template(ctx, "strict.html", {})
