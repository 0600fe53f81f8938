"""Natural Units: conversion factors between CGS, SI, geometrized and natural units."""

__app_name__ = "Natural Units"
__version__ = "0.1.0"

from natural_units.core.dimension import Dimension, UnitSystem  # noqa: E402
from natural_units.core.factor import ConversionFactor, apply, convert, invert  # noqa: E402
from natural_units.core.presets import (  # noqa: E402
    cgs_to_geom,
    cgs_to_geom_scaled,
    cgs_to_geom_solar,
    cgs_to_natural,
    cgs_to_si,
)
from natural_units.utils.constants import CONSTANT_CGS, PhysicalConstants  # noqa: E402

__all__ = [
    "CONSTANT_CGS",
    "ConversionFactor",
    "Dimension",
    "PhysicalConstants",
    "UnitSystem",
    "apply",
    "cgs_to_geom",
    "cgs_to_geom_scaled",
    "cgs_to_geom_solar",
    "cgs_to_natural",
    "cgs_to_si",
    "convert",
    "invert",
]
