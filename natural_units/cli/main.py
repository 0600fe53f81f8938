"""Natural Units command-line interface.

Entry point for the ``natunits`` CLI tool.
"""

from __future__ import annotations

import logging

import click
from rich.console import Console

from natural_units import __app_name__, __version__

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name=__app_name__)
@click.option("--verbose", "-v", is_flag=True, help="Enable informational logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Natural Units — conversion factors between CGS, SI, geometrized and natural units."""
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    ctx.ensure_object(dict)
    ctx.obj["console"] = console


# Import and register sub-commands
from natural_units.cli.factors_cmd import factors  # noqa: E402
from natural_units.cli.convert_cmd import convert  # noqa: E402
from natural_units.cli.info_cmd import info  # noqa: E402
from natural_units.cli.report_cmd import report  # noqa: E402

cli.add_command(factors)
cli.add_command(convert)
cli.add_command(info)
cli.add_command(report)


def main() -> None:
    """Convenience wrapper for entry-point scripts."""
    cli()
