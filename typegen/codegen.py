"""Render templates and write generated output.

Takes the context from context_builder and produces TypeScript declarations.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import jinja2

from .config import DEFAULT_OPTIONS, GeneratorOptions
from .context_builder import build_context, build_declaration

TEMPLATE_DIR = Path(__file__).parent / "templates"

DECLARATION_SEPARATOR = "\n\n"


@lru_cache(maxsize=None)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_declaration(declaration: dict[str, Any]) -> str:
    """Render one declaration context to TypeScript."""
    template = _environment().get_template(declaration["template"])
    return template.render(**declaration)


def emit_declaration(
    name: str,
    schema: dict[str, Any],
    schemas: dict[str, Any],
    options: GeneratorOptions = DEFAULT_OPTIONS,
) -> str:
    """Build and render the declaration for a single schema."""
    return render_declaration(build_declaration(name, schema, schemas, options))


def render(context: dict[str, Any]) -> str:
    """Render every declaration in the context, separated by a blank line."""
    return DECLARATION_SEPARATOR.join(
        render_declaration(declaration) for declaration in context["declarations"]
    )


def generate_types(
    schemas: dict[str, Any],
    options: GeneratorOptions | None = None,
) -> str:
    """Generate TypeScript declarations for a whole schema mapping."""
    return render(build_context(schemas, options))


def generate(context: dict[str, Any], output_path: Path | str | None = None) -> str:
    """Render the context and, if given an output path, write it there."""
    output = render(context)
    if output_path is None:
        return output

    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(output + "\n", encoding="utf-8")

    print(f"Generated {path} ({context['declaration_count']} declarations)")
    return output
