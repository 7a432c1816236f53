"""Entry point: python -m typegen SPEC

Reads an OpenAPI document, generates TypeScript declarations for
components.schemas and prints them or writes them to --output.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .codegen import generate
from .config import DEFAULT_OPTIONS, ConfigError, load_options
from .context_builder import build_context
from .loader import SpecError, get_schemas, load_spec


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("spec_path", type=click.Path(path_type=Path))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(path_type=Path),
    default=None,
    help="File to write the declarations to (default: stdout)",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="YAML/JSON file with generator options",
)
@click.option(
    "--prefix",
    "naming_prefix",
    default=None,
    help="Prefix for every declared name  [default: I]",
)
@click.option(
    "--inline-ref/--named-ref",
    "inline_ref",
    default=None,
    help="Expand $ref into inline types instead of referencing declared names",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output")
def main(
    spec_path: Path,
    output_path: Path | None,
    config_path: Path | None,
    naming_prefix: str | None,
    inline_ref: bool | None,
    verbose: bool,
) -> None:
    """Generate TypeScript types from the component schemas in SPEC_PATH."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(config_path) if config_path else DEFAULT_OPTIONS
        spec = load_spec(spec_path)
    except (ConfigError, SpecError) as exc:
        raise click.ClickException(str(exc)) from exc

    options = options.with_overrides(naming_prefix=naming_prefix, inline_ref=inline_ref)
    context = build_context(get_schemas(spec), options)
    output = generate(context, output_path)
    if output_path is None:
        click.echo(output)


if __name__ == "__main__":
    main()
