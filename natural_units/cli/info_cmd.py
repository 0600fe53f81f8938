"""CLI command for listing physical constants and factor presets."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from natural_units.core.dimension import UnitSystem
from natural_units.core.presets import PRESET_DESCRIPTIONS, get_preset, list_presets
from natural_units.utils.constants import CONSTANT_CGS, DESCRIPTIONS
from natural_units.utils.units import constant_unit, convert_constants


@click.group("info")
@click.pass_context
def info(ctx: click.Context) -> None:
    """List physical constants and factor presets."""
    pass


@info.command("constants")
@click.option(
    "--system",
    type=click.Choice(["cgs", "si"], case_sensitive=False),
    default="cgs",
    show_default=True,
    help="Unit system of the listed values.",
)
@click.pass_context
def info_constants(ctx: click.Context, system: str) -> None:
    """List the fundamental constant table."""
    console: Console = ctx.obj.get("console", Console())
    unit_system = UnitSystem.parse(system)
    table_values = convert_constants(CONSTANT_CGS, unit_system)

    table = Table(title=f"Physical Constants ({unit_system.value.upper()})")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="yellow")
    table.add_column("Value", style="green", justify="right")
    table.add_column("Unit", style="dim")

    for name, value in table_values.as_dict().items():
        table.add_row(name, DESCRIPTIONS[name], f"{value:.10e}", constant_unit(name, unit_system))
    console.print(table)


@info.command("presets")
@click.pass_context
def info_presets(ctx: click.Context) -> None:
    """List reference factor presets with their base factors."""
    console: Console = ctx.obj.get("console", Console())
    table = Table(title="Factor Presets")
    table.add_column("Name", style="cyan")
    table.add_column("Conversion", style="yellow")
    table.add_column("Mass", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Time", justify="right")

    for name in list_presets():
        mass, length, time = get_preset(name).base_factors()
        table.add_row(
            name,
            PRESET_DESCRIPTIONS[name],
            f"{mass:.6e}",
            f"{length:.6e}",
            f"{time:.6e}",
        )
    console.print(table)
