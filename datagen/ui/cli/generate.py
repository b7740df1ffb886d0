"""
CLI command for one-shot file generation.

Thin wrapper over ``datagen.core.use_cases.create_file``.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from datagen.core.models.settings import GeneratorSettings

_KIND_CHOICES = ["i", "f", "integer", "float"]


def _load_settings(ctx: click.Context) -> GeneratorSettings:
    """Load generator settings; an invalid settings file ends the command."""
    from datagen.core.config.loader import ConfigError, load_settings

    try:
        return load_settings(ctx.obj.get("config_path"))
    except ConfigError as e:
        click.secho(f"❌ {e}", fg="red")
        sys.exit(1)


@click.command()
@click.option(
    "--type",
    "-t",
    "kind",
    type=click.Choice(_KIND_CHOICES, case_sensitive=False),
    required=True,
    help="Data type: i/integer or f/float.",
)
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    required=True,
    help="Number of values to generate.",
)
@click.option(
    "--output",
    "-o",
    "filename",
    required=True,
    help="Destination file (overwritten if it exists).",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def generate(
    ctx: click.Context,
    kind: str,
    count: int,
    filename: str,
    seed: int | None,
    as_json: bool,
) -> None:
    """Generate a data file without the interactive menu.

    Examples:

        datagen generate -t i -n 100 -o ints.txt

        datagen generate --type float --count 5 --output f.txt --seed 42
    """
    from pydantic import ValidationError

    from datagen.core.models.request import DataKind, GenerationRequest
    from datagen.core.services.generator import make_rng
    from datagen.core.use_cases.create_file import create_data_file

    settings = _load_settings(ctx)

    try:
        request = GenerationRequest(
            kind=DataKind.parse(kind),
            count=count,
            filename=filename,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e), param_hint="'--output'") from e

    result = create_data_file(request, settings=settings, rng=make_rng(seed))

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        sys.exit(0 if result.ok else 1)

    if not result.ok:
        click.secho(f"❌ Error creating file: {result.error}", fg="red")
        sys.exit(1)

    if not ctx.obj.get("quiet"):
        click.secho("✅ File created successfully!", fg="green")
        click.echo(f"   {result.written} {request.kind.value} values → {result.path}")
