"""Utility modules for Natural Units."""

from natural_units.utils.constants import CONSTANT_CGS, PhysicalConstants
from natural_units.utils.units import convert_constants, get_unit_registry

__all__ = ["CONSTANT_CGS", "PhysicalConstants", "convert_constants", "get_unit_registry"]
