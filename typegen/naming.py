"""Turn schema names, property keys and enum values into TypeScript tokens.

Examples:
  enum value "user-name"   -> USER_NAME
  enum value "userName"    -> USER_NAME
  enum value "2fa"         -> _2FA
  property   "userName"    -> userName
  property   "x-rate-limit" -> 'x-rate-limit'
  $ref "#/components/schemas/Pet" -> IPet
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .config import GeneratorOptions

REF_PREFIX = "#/components/schemas/"

_BARE_KEY = re.compile(r"[a-zA-Z_]\w*", re.ASCII)
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f\u2028\u2029]")


def safe_enum_key(value: str) -> str:
    """Convert an enum value to an UPPER_SNAKE_CASE member name."""
    key = re.sub(r"[-\s]+", "_", value.strip())
    key = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", key)
    key = re.sub(r"\W", "_", key)
    if not key or key[0].isdigit():
        key = "_" + key
    return key.upper()


def safe_key(key: str) -> str:
    """Return an object key, quoted unless it is a bare identifier."""
    if _BARE_KEY.fullmatch(key):
        return key
    escaped = key.replace("\\", "\\\\").replace("'", "\\'")
    escaped = _CONTROL_CHARS.sub(lambda m: f"\\u{ord(m.group()):04x}", escaped)
    return f"'{escaped}'"


def literal_text(value: Any) -> str:
    """Return the text of an enum value; non-strings use their JSON spelling."""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False, default=str)


def string_literal(value: Any) -> str:
    """Render a value as a double-quoted TypeScript string literal."""
    return json.dumps(literal_text(value), ensure_ascii=False)


def ref_name(ref: str, options: GeneratorOptions) -> str:
    """Build the declared type name a $ref points at."""
    return options.naming_prefix + ref.replace(REF_PREFIX, "")
