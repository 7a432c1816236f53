"""Load an OpenAPI document and look up its component schemas.

Reads JSON or YAML from disk and extracts components.schemas.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from .naming import REF_PREFIX


class SpecError(Exception):
    """Raised when the OpenAPI document cannot be loaded."""


def load_spec(path: Path | str) -> dict[str, Any]:
    """Load the OpenAPI document from disk."""
    spec_file = Path(path)
    if not spec_file.exists():
        raise SpecError(f"Spec file not found: {spec_file}")

    with open(spec_file, encoding="utf-8") as f:
        try:
            if spec_file.suffix.lower() == ".json":
                spec = json.load(f)
            else:
                spec = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as exc:
            raise SpecError(f"Failed to parse spec file {spec_file}: {exc}") from exc

    if spec is None:
        spec = {}
    if not isinstance(spec, dict):
        raise SpecError(f"Spec root must be a mapping: {spec_file}")
    return spec


def get_schemas(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract component schemas from the spec."""
    components = spec.get("components") or {}
    return components.get("schemas") or {}


def ref_to_name(ref: str) -> str:
    """Strip the components prefix from a $ref, leaving the schema name."""
    return ref.replace(REF_PREFIX, "")


def resolve_inline(schemas: dict[str, Any], ref: str) -> dict[str, Any] | None:
    """Resolve a $ref against the schema mapping, or None if it is missing."""
    return schemas.get(ref_to_name(ref))
