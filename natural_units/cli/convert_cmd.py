"""CLI command for converting values between unit systems."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from natural_units.cli.common import factor_options, resolve_definition
from natural_units.core.dimension import Dimension
from natural_units.core.factor import apply, invert


def _parse_dimension(ctx: click.Context, param: click.Parameter, value: str) -> Dimension:
    try:
        return Dimension.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


@click.command("convert")
@click.argument("values", type=float, nargs=-1, required=True)
@click.option(
    "--dimension",
    "-d",
    type=str,
    required=True,
    callback=_parse_dimension,
    help=f"Physical dimension of the values, one of: {', '.join(d.value for d in Dimension)}.",
)
@factor_options
@click.option("--invert", "inverse", is_flag=True, help="Convert from target back to source units.")
@click.pass_context
def convert(
    ctx: click.Context,
    values: tuple[float, ...],
    dimension: Dimension,
    preset: str | None,
    config_path: str | None,
    mass: float | None,
    length: float | None,
    time_: float | None,
    inverse: bool,
) -> None:
    """Convert VALUES of a given dimension with a conversion factor."""
    console: Console = ctx.obj.get("console", Console())
    definition = resolve_definition(console, preset, config_path, mass, length, time_)
    factor = definition.build()
    source = definition.source_system or "source"
    target = definition.target_system or "target"
    if inverse:
        src, dst, op = target, source, invert
    else:
        src, dst, op = source, target, apply

    table = Table(title=f"{dimension.label}: {src} -> {dst}")
    table.add_column("Input", style="cyan", justify="right")
    table.add_column("Output", style="green", justify="right")

    for value in values:
        table.add_row(f"{value:.10g}", f"{op(value, dimension, factor):.10g}")

    console.print(table)
