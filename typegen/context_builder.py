"""Build Jinja2 template context from component schemas.

Decides the declaration kind for each schema and assembles the
context dicts rendered by codegen.
"""

from __future__ import annotations

import logging
from typing import Any

from .config import DEFAULT_OPTIONS, GeneratorOptions
from .naming import literal_text, ref_name, safe_enum_key, string_literal
from .schema_parser import ANY_TYPE, inline_object

logger = logging.getLogger(__name__)

# Declaration kind -> template rendering it
_KIND_TEMPLATES: dict[str, str] = {
    "enum": "enum.ts.j2",
    "union": "alias.ts.j2",
    "intersection": "alias.ts.j2",
    "interface": "interface.ts.j2",
    "alias": "alias.ts.j2",
}


def _ref_or_inline(
    sub: Any,
    schemas: dict[str, Any],
    options: GeneratorOptions,
    expanding: tuple[str, ...],
) -> str:
    """Render a combinator member as its named type or an inline object."""
    if isinstance(sub, dict) and sub.get("$ref") is not None:
        return ref_name(str(sub["$ref"]), options)
    return inline_object(sub if isinstance(sub, dict) else {}, schemas, True, options, expanding)


def _declaration_kind(schema: dict[str, Any]) -> str:
    if schema.get("enum") is not None:
        return "enum"
    if schema.get("oneOf") is not None or schema.get("anyOf") is not None:
        return "union"
    if schema.get("allOf") is not None:
        return "intersection"
    if schema.get("type") == "object" or schema.get("properties"):
        return "interface"
    return "alias"


def build_declaration(
    name: str,
    schema: dict[str, Any],
    schemas: dict[str, Any],
    options: GeneratorOptions = DEFAULT_OPTIONS,
) -> dict[str, Any]:
    """Build the template context for one top-level schema."""
    if not isinstance(schema, dict):
        schema = {}

    kind = _declaration_kind(schema)
    expanding = (name,)
    declaration: dict[str, Any] = {
        "schema_name": name,
        "name": f"{options.naming_prefix}{name}",
        "kind": kind,
        "template": _KIND_TEMPLATES[kind],
    }

    if kind == "enum":
        declaration["members"] = [
            {"key": safe_enum_key(literal_text(value)), "value": string_literal(value)}
            for value in schema["enum"]
        ]
    elif kind == "union":
        variants = schema.get("oneOf")
        if variants is None:
            variants = schema["anyOf"]
        parts = [_ref_or_inline(s, schemas, options, expanding) for s in variants]
        declaration["expression"] = " | ".join(parts) or ANY_TYPE
    elif kind == "intersection":
        parts = [_ref_or_inline(s, schemas, options, expanding) for s in schema["allOf"]]
        declaration["expression"] = " & ".join(parts) or ANY_TYPE
    elif kind == "interface":
        declaration["body"] = inline_object(schema, schemas, True, options, expanding)
    else:
        declaration["expression"] = ANY_TYPE

    logger.debug("Schema %s -> %s %s", name, kind, declaration["name"])
    return declaration


def build_context(
    schemas: dict[str, Any],
    options: GeneratorOptions | None = None,
) -> dict[str, Any]:
    """Build the full template context from the schema mapping."""
    options = options or DEFAULT_OPTIONS
    declarations = [
        build_declaration(str(name), schema, schemas, options)
        for name, schema in schemas.items()
    ]

    kinds: dict[str, int] = {}
    for declaration in declarations:
        kinds[declaration["kind"]] = kinds.get(declaration["kind"], 0) + 1

    return {
        "declarations": declarations,
        "declaration_count": len(declarations),
        "kinds": kinds,
    }
