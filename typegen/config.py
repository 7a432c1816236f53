"""Generator options shared by every stage of a run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


class ConfigError(Exception):
    """Raised when generator options are invalid."""


# Option keys accepted by from_mapping(); camelCase spellings included.
_OPTION_KEYS: dict[str, str] = {
    "naming_prefix": "naming_prefix",
    "namingPrefix": "naming_prefix",
    "interface_prefix": "naming_prefix",
    "interfacePrefix": "naming_prefix",
    "inline_ref": "inline_ref",
    "inlineRef": "inline_ref",
}


@dataclass(frozen=True)
class GeneratorOptions:
    """Options for a generation run.

    naming_prefix: prefix for every declared name, e.g. 'I' or ''
    inline_ref: expand $ref into inline structural types instead of names
    """

    naming_prefix: str = "I"
    inline_ref: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any] | None) -> GeneratorOptions:
        """Build options from a plain mapping, e.g. a parsed config section."""
        if values is None:
            return cls()
        if not isinstance(values, Mapping):
            raise ConfigError("Generator options must be a mapping.")

        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            field_name = _OPTION_KEYS.get(key)
            if field_name is None:
                raise ConfigError(f"Unknown generator option: {key!r}")
            kwargs[field_name] = value

        prefix = kwargs.get("naming_prefix", "I")
        if prefix is None:
            prefix = ""
        if not isinstance(prefix, str):
            raise ConfigError("naming_prefix must be a string.")
        kwargs["naming_prefix"] = prefix

        inline_ref = kwargs.get("inline_ref", False)
        if not isinstance(inline_ref, bool):
            raise ConfigError("inline_ref must be a boolean.")

        return cls(**kwargs)

    def with_overrides(self, **overrides: Any) -> GeneratorOptions:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


DEFAULT_OPTIONS = GeneratorOptions()


def load_options(config_path: Path | str) -> GeneratorOptions:
    """Load generator options from a YAML or JSON file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse configuration file: {exc}") from exc

    return GeneratorOptions.from_mapping(parsed)
