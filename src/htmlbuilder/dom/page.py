"""Wrap a rendered fragment in a complete HTML document."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_page(body: str, title: str = "", lang: str = "en") -> str:
    """Render `body` (trusted HTML) inside page.html.j2."""
    tmpl = _get_env().get_template("page.html.j2")
    return tmpl.render(body=body, title=title, lang=lang)
