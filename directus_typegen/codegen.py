"""Render templates and write generated output.

Takes the context from context_builder and produces the TypeScript
declaration file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

TEMPLATE_DIR = Path(__file__).parent / "templates"


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_base(context: dict[str, Any]) -> str:
    """Render the `components` interface for every schema."""
    return _environment().get_template("components.d.ts.j2").render(**context)


def render_declarations(context: dict[str, Any], base: str | None = None) -> str:
    """Render the base block followed by the collection aggregates."""
    if base is None:
        base = render_base(context)
    template = _environment().get_template("collections.d.ts.j2")
    return template.render(base=base, **context)


def write_output(source: str, path: str | Path) -> Path:
    """Write the declaration file, replacing any previous one."""
    output_path = Path.cwd() / path
    output_path.write_text(source, encoding="utf-8")
    return output_path
