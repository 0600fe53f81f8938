"""CLI command for report generation."""

from __future__ import annotations

import click
from rich.console import Console

from natural_units.cli.common import factor_options, resolve_definition
from natural_units.reports.summary import generate_text_report, save_text_report


@click.command("report")
@factor_options
@click.option(
    "--output", "-o",
    type=click.Path(),
    default=None,
    help="Output file path (printed to the console if not specified).",
)
@click.pass_context
def report(
    ctx: click.Context,
    preset: str | None,
    config_path: str | None,
    mass: float | None,
    length: float | None,
    time_: float | None,
    output: str | None,
) -> None:
    """Generate a conversion factor summary report."""
    console: Console = ctx.obj.get("console", Console())
    definition = resolve_definition(console, preset, config_path, mass, length, time_)

    if output:
        save_text_report(definition, output)
        console.print(f"[green]Text report saved:[/green] {output}")
    else:
        console.print(f"\n{generate_text_report(definition)}", markup=False)
