"""Reference conversion factors out of CGS.

Each preset is a pure function of :data:`CONSTANT_CGS` and the derivation
in :mod:`natural_units.core.factor`.
"""

from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from natural_units.core.dimension import UnitSystem
from natural_units.core.factor import ConversionFactor
from natural_units.utils.constants import CONSTANT_CGS

logger = logging.getLogger(__name__)


def identity() -> ConversionFactor:
    """Factor that leaves every value unchanged."""
    return ConversionFactor(1.0, 1.0, 1.0)


def cgs_to_si() -> ConversionFactor:
    """CGS -> SI: 1e3 g per kg, 1e2 cm per m, 1 s per s."""
    return ConversionFactor(1e3, 1e2, 1.0)


def cgs_to_geom() -> ConversionFactor:
    """CGS -> geometrized units (c = G = 1), lengths kept in cm."""
    c = CONSTANT_CGS.c
    return ConversionFactor(
        CONSTANT_CGS.G / (c * c),
        1.0,
        c,
    )


def cgs_to_natural() -> ConversionFactor:
    """CGS -> natural units (hbar = c = 1), energies in eV."""
    c = CONSTANT_CGS.c
    eV = CONSTANT_CGS.eV
    hbar = CONSTANT_CGS.hbar
    return ConversionFactor(
        eV / hbar,
        eV / (hbar * c),
        (c * c) / eV,
    )


def cgs_to_geom_solar() -> ConversionFactor:
    """CGS -> geometrized units with the solar mass as the unit of mass.

    Lengths come out in units of G·M_sun/c² and times in G·M_sun/c³.
    """
    c = CONSTANT_CGS.c
    G = CONSTANT_CGS.G
    m_solar = CONSTANT_CGS.m_solar
    return ConversionFactor(
        1.0 / m_solar,
        (c * c) / (G * m_solar),
        (c * c * c) / (G * m_solar),
    )


def cgs_to_geom_scaled(length_scale: float = CONSTANT_CGS.r_solar) -> ConversionFactor:
    """CGS -> geometrized units with lengths measured in *length_scale*.

    Args:
        length_scale: Unit length [cm]. Defaults to the solar radius.
    """
    c = CONSTANT_CGS.c
    G = CONSTANT_CGS.G
    scale = np.float64(length_scale)
    with np.errstate(all="ignore"):
        mass = G / ((c * c) * scale)
        length = 1.0 / scale
        time = c / scale
    return ConversionFactor(float(mass), float(length), float(time))


PRESETS: dict[str, Callable[[], ConversionFactor]] = {
    "identity": identity,
    "si": cgs_to_si,
    "geom": cgs_to_geom,
    "natural": cgs_to_natural,
    "geom-solar": cgs_to_geom_solar,
    "geom-rsun": cgs_to_geom_scaled,
}

PRESET_DESCRIPTIONS: dict[str, str] = {
    "identity": "CGS -> CGS (no change)",
    "si": "CGS -> SI",
    "geom": "CGS -> geometrized (c = G = 1)",
    "natural": "CGS -> natural (hbar = c = 1, eV)",
    "geom-solar": "CGS -> geometrized, unit mass M_sun",
    "geom-rsun": "CGS -> geometrized, unit length R_sun",
}


def list_presets() -> list[str]:
    """Return all preset names."""
    return list(PRESETS.keys())


def get_preset(name: str) -> ConversionFactor:
    """Build the preset factor called *name*.

    Raises:
        KeyError: If *name* is not a known preset.
    """
    key = name.strip().lower()
    if key not in PRESETS:
        raise KeyError(f"Preset '{name}' not found. Available: {list_presets()}")
    logger.debug("Building preset %s", key)
    return PRESETS[key]()


_REFERENCE: dict[UnitSystem, Callable[[], ConversionFactor]] = {
    UnitSystem.CGS: identity,
    UnitSystem.SI: cgs_to_si,
    UnitSystem.GEOMETRIZED: cgs_to_geom,
    UnitSystem.NATURAL: cgs_to_natural,
}


def reference_factor(system: UnitSystem) -> ConversionFactor:
    """Return the reference factor from CGS into *system*."""
    return _REFERENCE[system]()
