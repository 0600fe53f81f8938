"""Conversion factor summary reports.

Produces a plain-text report from a FactorDefinition, listing the base
factors, all derived factors and a few example conversions of the CGS
constant table.
"""

from __future__ import annotations

from datetime import datetime, timezone

from natural_units import __app_name__, __version__
from natural_units.core.config import FactorDefinition
from natural_units.core.dimension import Dimension
from natural_units.core.factor import ConversionFactor, apply
from natural_units.utils.constants import CONSTANT_CGS

# (label, CGS value, dimension) pairs shown under EXAMPLE CONVERSIONS
_EXAMPLES: list[tuple[str, float, Dimension]] = [
    ("Solar mass", CONSTANT_CGS.m_solar, Dimension.MASS),
    ("Solar radius", CONSTANT_CGS.r_solar, Dimension.LENGTH),
    ("Electron mass", CONSTANT_CGS.m_e, Dimension.MASS),
    ("Speed of light", CONSTANT_CGS.c, Dimension.VELOCITY),
    ("Electronvolt", CONSTANT_CGS.eV, Dimension.ENERGY),
]


def generate_text_report(definition: FactorDefinition) -> str:
    """Generate a plain-text factor summary.

    Args:
        definition: Factor definition to report on.

    Returns:
        Multi-line text report string.
    """
    factor = definition.build()
    lines: list[str] = []
    _hr = "=" * 60

    lines.append(_hr)
    lines.append(f"  {__app_name__} — Conversion Factor Report")
    lines.append(f"  {definition.meta.name}")
    lines.append(_hr)
    lines.append("")

    lines.append("SYSTEMS")
    lines.append("-" * 40)
    _add_param_str(lines, "Source", definition.source_system or "—")
    _add_param_str(lines, "Target", definition.target_system or "—")
    if definition.preset:
        _add_param_str(lines, "Preset", definition.preset)
    lines.append("")

    lines.append("CONVERSION FACTORS")
    lines.append("-" * 40)
    for dim in Dimension:
        _add_factor(lines, dim.label, factor.factor(dim))
    lines.append("")

    if definition.source_system == "cgs":
        lines.append("EXAMPLE CONVERSIONS")
        lines.append("-" * 40)
        _add_examples(lines, factor)
        lines.append("")

    lines.append(_hr)
    lines.append(f"  Generated: {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')}")
    lines.append(f"  {__app_name__} v{__version__}")
    lines.append(_hr)

    return "\n".join(lines)


def _add_factor(lines: list[str], label: str, value: float) -> None:
    lines.append(f"  {label:<20s} {value:>16.8e}")


def _add_examples(lines: list[str], factor: ConversionFactor) -> None:
    for label, value, dim in _EXAMPLES:
        lines.append(f"  {label:<20s} {value:>12.4e} -> {apply(value, dim, factor):.6e}")


def _add_param_str(lines: list[str], label: str, value: str) -> None:
    """Add a string parameter line."""
    lines.append(f"  {label:<20s} {value:>12}")


def save_text_report(definition: FactorDefinition, filepath: str) -> None:
    """Write the text report to *filepath*."""
    with open(filepath, "w", encoding="utf-8") as f:
        f.write(generate_text_report(definition))
