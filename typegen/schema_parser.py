"""Map OpenAPI schemas to TypeScript type expressions.

Handles:
- $ref as a named type, or expanded inline when inline_ref is set
- oneOf/anyOf unions and allOf intersections
- string enums as literal unions
- arrays, maps and inline object literals
- ref cycles during inline expansion (the repeated ref stays named)
"""

from __future__ import annotations

import logging
from typing import Any

from .config import GeneratorOptions
from .loader import ref_to_name, resolve_inline
from .naming import ref_name, safe_key, string_literal

logger = logging.getLogger(__name__)

ANY_TYPE = "any"
ANY_ARRAY = "any[]"
ANY_MAP = "{ [key: string]: any }"
EMPTY_OBJECT = "{}"

_PRIMITIVES: dict[str, str] = {
    "integer": "number",
    "number": "number",
    "string": "string",
    "boolean": "boolean",
}


def _has_properties(schema: dict[str, Any]) -> bool:
    return bool(schema.get("properties"))


def _expand_ref(
    ref: str,
    schemas: dict[str, Any],
    options: GeneratorOptions,
    expanding: tuple[str, ...],
) -> str:
    """Expand a $ref in place instead of naming it."""
    name = ref_to_name(ref)
    if name in expanding:
        logger.debug("Ref cycle %s -> %s, keeping named type", " -> ".join(expanding), name)
        return ref_name(ref, options)

    resolved = resolve_inline(schemas, ref)
    if not isinstance(resolved, dict):
        logger.warning("Unresolved $ref %r, falling back to %s", ref, ANY_TYPE)
        return ANY_TYPE

    chain = expanding + (name,)
    if _has_properties(resolved):
        return inline_object(resolved, schemas, True, options, expanding=chain)
    return map_type(resolved, schemas, options, expanding=chain)


def map_type(
    schema: dict[str, Any] | None,
    schemas: dict[str, Any],
    options: GeneratorOptions,
    expanding: tuple[str, ...] = (),
) -> str:
    """Resolve an OpenAPI schema to a TypeScript type expression.

    expanding holds the schema names already being inlined on this path.
    """
    if not schema or not isinstance(schema, dict):
        return ANY_TYPE

    if schema.get("$ref") is not None:
        ref = str(schema["$ref"])
        if options.inline_ref:
            return _expand_ref(ref, schemas, options, expanding)
        return ref_name(ref, options)

    for key, joiner in (("oneOf", " | "), ("anyOf", " | "), ("allOf", " & ")):
        if schema.get(key) is not None:
            return joiner.join(
                map_type(sub, schemas, options, expanding) for sub in schema[key]
            ) or ANY_TYPE

    schema_type = schema.get("type")
    if schema_type == "string" and schema.get("enum"):
        return " | ".join(string_literal(v) for v in schema["enum"])
    if schema_type in _PRIMITIVES:
        return _PRIMITIVES[schema_type]
    if schema_type == "array":
        items = schema.get("items")
        if not items:
            return ANY_ARRAY
        return f"{map_type(items, schemas, options, expanding)}[]"
    if schema_type == "object":
        if "properties" in schema and schema["properties"] is not None:
            return inline_object(schema, schemas, True, options, expanding=expanding)
        return ANY_MAP

    return ANY_TYPE


def inline_object(
    schema: dict[str, Any] | None,
    schemas: dict[str, Any],
    with_braces: bool,
    options: GeneratorOptions,
    expanding: tuple[str, ...] = (),
) -> str:
    """Render an object schema as an inline TypeScript object literal."""
    properties = (schema or {}).get("properties")
    if not properties:
        return EMPTY_OBJECT

    required_fields = set(schema.get("required") or [])
    lines = []
    for prop_name, prop_schema in properties.items():
        marker = "" if prop_name in required_fields else "?"
        type_str = map_type(prop_schema, schemas, options, expanding)
        lines.append(f"  {safe_key(str(prop_name))}{marker}: {type_str};")

    body = "\n".join(lines)
    if with_braces:
        return f"{{\n{body}\n}}"
    return body
