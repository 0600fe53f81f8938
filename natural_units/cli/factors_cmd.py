"""CLI command for deriving and saving conversion factors."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from natural_units.cli.common import factor_options, resolve_definition
from natural_units.core.config import save_factor_json
from natural_units.core.dimension import Dimension


@click.command("factors")
@factor_options
@click.option("--name", type=str, default=None, help="Name stored in the output file.")
@click.option("--output", "-o", type=click.Path(), default=None, help="Output file (JSON).")
@click.pass_context
def factors(
    ctx: click.Context,
    preset: str | None,
    config_path: str | None,
    mass: float | None,
    length: float | None,
    time_: float | None,
    name: str | None,
    output: str | None,
) -> None:
    """Derive all fourteen conversion factors from three base factors."""
    console: Console = ctx.obj.get("console", Console())
    definition = resolve_definition(console, preset, config_path, mass, length, time_)
    if name:
        definition.meta.name = name
    factor = definition.build()

    table = Table(title=f"Conversion Factors ({definition.meta.name})")
    table.add_column("Dimension", style="cyan")
    table.add_column("Factor", style="green", justify="right")
    table.add_column("Kind", style="dim")

    base = {Dimension.MASS, Dimension.LENGTH, Dimension.TIME}
    for dim in Dimension:
        table.add_row(dim.label, f"{factor.factor(dim):.10e}", "base" if dim in base else "derived")

    console.print(table)

    if output:
        save_factor_json(definition, output)
        console.print(f"\n[dim]Saved to {output}[/dim]")
