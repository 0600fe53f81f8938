"""Unit labels and cross-system constant tables for Natural Units.

Built on top of pint.  Only CGS and SI have a pint representation;
geometrized and natural units are dimensionless rescalings and are
handled by :class:`~natural_units.core.factor.ConversionFactor` alone.
"""

from __future__ import annotations

from dataclasses import fields

import pint

from natural_units.core.dimension import Dimension, UnitSystem
from natural_units.utils.constants import CGS_UNITS, CONSTANT_CGS, PhysicalConstants

# Module-level unit registry (singleton)
_ureg = pint.UnitRegistry()
_ureg.default_format = "~P"  # short pretty format


def get_unit_registry() -> pint.UnitRegistry:
    """Return the shared pint UnitRegistry instance."""
    return _ureg


Q_ = _ureg.Quantity


UNIT_LABELS: dict[UnitSystem, dict[Dimension, str]] = {
    UnitSystem.CGS: {
        Dimension.TIME: "s",
        Dimension.LENGTH: "cm",
        Dimension.MASS: "g",
        Dimension.VELOCITY: "cm/s",
        Dimension.MOMENTUM: "g*cm/s",
        Dimension.ANGULAR_VELOCITY: "1/s",
        Dimension.ACCELERATION: "cm/s**2",
        Dimension.ENERGY: "erg",
        Dimension.ENERGY_DENSITY: "erg/cm**3",
        Dimension.ANGULAR_MOMENTUM: "g*cm**2/s",
        Dimension.FORCE: "dyn",
        Dimension.POWER: "erg/s",
        Dimension.PRESSURE: "dyn/cm**2",
        Dimension.DENSITY: "g/cm**3",
    },
    UnitSystem.SI: {
        Dimension.TIME: "s",
        Dimension.LENGTH: "m",
        Dimension.MASS: "kg",
        Dimension.VELOCITY: "m/s",
        Dimension.MOMENTUM: "kg*m/s",
        Dimension.ANGULAR_VELOCITY: "1/s",
        Dimension.ACCELERATION: "m/s**2",
        Dimension.ENERGY: "J",
        Dimension.ENERGY_DENSITY: "J/m**3",
        Dimension.ANGULAR_MOMENTUM: "kg*m**2/s",
        Dimension.FORCE: "N",
        Dimension.POWER: "W",
        Dimension.PRESSURE: "Pa",
        Dimension.DENSITY: "kg/m**3",
    },
}


def unit_label(dimension: Dimension, system: UnitSystem) -> str:
    """Return the pint unit string of *dimension* in *system*.

    Raises:
        ValueError: If *system* has no pint representation.
    """
    try:
        return UNIT_LABELS[system][dimension]
    except KeyError:
        raise ValueError(f"No unit labels for {system.value} units") from None


def to_quantity(value: float, dimension: Dimension, system: UnitSystem) -> pint.Quantity:
    """Attach the *system* unit of *dimension* to a bare number."""
    return Q_(value, unit_label(dimension, system))


def reference_ratio(dimension: Dimension, source: UnitSystem, target: UnitSystem) -> float:
    """Number of *target* units in one *source* unit of *dimension*.

    Computed independently of the dimensional-analysis derivation, so it
    serves as a cross-check of CGS/SI factors.
    """
    return to_quantity(1.0, dimension, source).to(unit_label(dimension, target)).magnitude


def convert_constants(table: PhysicalConstants, system: UnitSystem) -> PhysicalConstants:
    """Express a CGS constant table in another pint-representable system.

    Each value is converted once from its CGS unit, so the resulting table
    stays self-consistent with *table*.

    Raises:
        ValueError: If *system* is not CGS or SI.
    """
    if system is UnitSystem.CGS:
        return table
    if system is not UnitSystem.SI:
        raise ValueError(f"Constants cannot be expressed in {system.value} units with pint")

    values: dict[str, float] = {}
    for f in fields(table):
        q = Q_(getattr(table, f.name), CGS_UNITS[f.name])
        values[f.name] = float(q.to_base_units().magnitude)
    return PhysicalConstants(**values)


def constant_unit(name: str, system: UnitSystem) -> str:
    """Return a printable unit for constant *name* in *system*."""
    q = Q_(1.0, CGS_UNITS[name])
    if system is UnitSystem.SI:
        q = q.to_base_units()
    unit = q.units
    return f"{unit:~P}"


CONSTANT_SI = convert_constants(CONSTANT_CGS, UnitSystem.SI)
