"""Factor selection shared by the CLI commands."""

from __future__ import annotations

import click
from rich.console import Console

from natural_units.core.config import FactorDefinition, ProjectMeta, load_factor_json
from natural_units.core.dimension import UnitSystem
from natural_units.core.presets import get_preset, list_presets
from natural_units.utils.validation import validate_base_factors

_PRESET_TARGETS = {
    "identity": UnitSystem.CGS,
    "si": UnitSystem.SI,
    "natural": UnitSystem.NATURAL,
}


def factor_options(func):
    """Attach the --preset / --config / --mass / --length / --time options."""
    options = [
        click.option(
            "--preset",
            "-p",
            type=click.Choice(list_presets(), case_sensitive=False),
            default=None,
            help="Named reference factor out of CGS.",
        ),
        click.option(
            "--config",
            "config_path",
            type=click.Path(exists=True),
            default=None,
            help="Factor definition JSON (from `factors -o`).",
        ),
        click.option("--mass", type=float, default=None, help="Base mass factor."),
        click.option("--length", type=float, default=None, help="Base length factor."),
        click.option("--time", "time_", type=float, default=None, help="Base time factor."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def resolve_definition(
    console: Console,
    preset: str | None,
    config_path: str | None,
    mass: float | None,
    length: float | None,
    time_: float | None,
) -> FactorDefinition:
    """Build a FactorDefinition from exactly one source of base factors.

    Exits with status 1 when the sources are missing or conflicting.
    Suspicious base factors are reported but still used.
    """
    custom = (mass, length, time_)
    has_custom = any(v is not None for v in custom)
    sources = sum([preset is not None, config_path is not None, has_custom])

    if sources > 1:
        console.print("[red]Error:[/red] Use only one of --preset, --config or --mass/--length/--time.")
        raise SystemExit(1)

    if preset is not None:
        key = preset.lower()
        target = _PRESET_TARGETS.get(key, UnitSystem.GEOMETRIZED)
        definition = FactorDefinition.from_factor(
            get_preset(key), UnitSystem.CGS, target, preset=key, name=f"cgs -> {key}"
        )
    elif config_path is not None:
        definition = load_factor_json(config_path)
    elif has_custom:
        if any(v is None for v in custom):
            console.print("[red]Error:[/red] --mass, --length and --time must be given together.")
            raise SystemExit(1)
        definition = FactorDefinition(
            meta=ProjectMeta(name="Custom factor"),
            conv_mass=mass,
            conv_length=length,
            conv_time=time_,
        )
    else:
        console.print("[red]Error:[/red] Provide --preset, --config or --mass/--length/--time.")
        raise SystemExit(1)

    check = validate_base_factors(definition.conv_mass, definition.conv_length, definition.conv_time)
    for msg in check.messages:
        console.print(f"[yellow]Warning:[/yellow] {msg.message}")

    return definition

