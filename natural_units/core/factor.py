"""Conversion factor derivation and application.

A :class:`ConversionFactor` is built from three base factors (mass, length,
time) between a source and a target unit system.  The remaining eleven
factors follow from dimensional analysis:

    velocity          = length / time
    momentum          = mass * velocity
    angular velocity  = 1 / time
    acceleration      = velocity / time
    energy            = mass * velocity²
    energy density    = energy / length³
    angular momentum  = momentum * length
    force             = mass * acceleration
    power             = energy / time
    pressure          = force / length²
    density           = mass / length³

Arithmetic is plain IEEE-754 double precision.  Zero or non-finite base
factors are accepted and propagate as inf/NaN instead of raising.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Union

import numpy as np

from natural_units.core.dimension import Dimension

Value = Union[float, np.ndarray]


def _derive(mass: float, length: float, time: float) -> dict[str, float]:
    """Derive all fourteen factors from the three base factors."""
    m = np.float64(mass)
    l = np.float64(length)  # noqa: E741
    t = np.float64(time)

    with np.errstate(all="ignore"):
        velocity = l / t
        momentum = m * velocity
        angular_velocity = np.float64(1.0) / t
        acceleration = velocity / t
        energy = m * (velocity * velocity)
        energy_density = energy / (l * l * l)
        angular_momentum = momentum * l
        force = m * acceleration
        power = energy / t
        pressure = force / (l * l)
        density = m / (l * l * l)

    return {
        "conv_mass": float(m),
        "conv_length": float(l),
        "conv_time": float(t),
        "conv_velocity": float(velocity),
        "conv_momentum": float(momentum),
        "conv_angular_velocity": float(angular_velocity),
        "conv_acceleration": float(acceleration),
        "conv_energy": float(energy),
        "conv_energy_density": float(energy_density),
        "conv_angular_momentum": float(angular_momentum),
        "conv_force": float(force),
        "conv_power": float(power),
        "conv_pressure": float(pressure),
        "conv_density": float(density),
    }


@dataclass(frozen=True, eq=False)
class ConversionFactor:
    """Multiplicative scale factors from a source to a target unit system.

    Only the three base factors are constructor arguments; every other
    field is derived from them in ``__post_init__``.
    Two factors are equal when their base factors are bitwise identical,
    so factors holding NaN compare equal to themselves.

    Args:
        conv_mass: Target mass units per source mass unit.
        conv_length: Target length units per source length unit.
        conv_time: Target time units per source time unit.
    """

    conv_mass: float
    conv_length: float
    conv_time: float
    conv_velocity: float = field(init=False)
    conv_momentum: float = field(init=False)
    conv_angular_velocity: float = field(init=False)
    conv_acceleration: float = field(init=False)
    conv_energy: float = field(init=False)
    conv_energy_density: float = field(init=False)
    conv_angular_momentum: float = field(init=False)
    conv_force: float = field(init=False)
    conv_power: float = field(init=False)
    conv_pressure: float = field(init=False)
    conv_density: float = field(init=False)

    def __post_init__(self) -> None:
        derived = _derive(self.conv_mass, self.conv_length, self.conv_time)
        for name, value in derived.items():
            object.__setattr__(self, name, value)

    def _key(self) -> bytes:
        return struct.pack("<3d", *self.base_factors())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConversionFactor):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    # --- Access ---

    def factor(self, dimension: Dimension) -> float:
        """Return the scale factor for *dimension*."""
        return getattr(self, dimension.field_name)

    def base_factors(self) -> tuple[float, float, float]:
        """Return ``(conv_mass, conv_length, conv_time)``."""
        return self.conv_mass, self.conv_length, self.conv_time

    def as_dict(self) -> dict[str, float]:
        """Return all fourteen factors keyed by dimension name."""
        return {dim.value: self.factor(dim) for dim in Dimension}

    # --- Application ---

    def apply(self, value: Value, dimension: Dimension) -> Value:
        return apply(value, dimension, self)

    def invert(self, value: Value, dimension: Dimension) -> Value:
        return invert(value, dimension, self)

    # --- Algebra ---

    def inverse(self) -> ConversionFactor:
        """Factor for the reverse direction (target -> source)."""
        with np.errstate(all="ignore"):
            mass, length, time = (1.0 / np.float64(x) for x in self.base_factors())
        return ConversionFactor(float(mass), float(length), float(time))

    def compose(self, other: ConversionFactor) -> ConversionFactor:
        """Factor for converting with ``self`` first, then ``other``.

        If ``self`` maps A -> B and ``other`` maps B -> C, the result maps A -> C.
        """
        return ConversionFactor(
            self.conv_mass * other.conv_mass,
            self.conv_length * other.conv_length,
            self.conv_time * other.conv_time,
        )


def _as_output(result: np.ndarray | np.floating) -> Value:
    if np.ndim(result) == 0:
        return float(result)
    return result


def apply(value: Value, dimension: Dimension, factor: ConversionFactor) -> Value:
    """Convert *value* from the source system into the target system.

    Args:
        value: Scalar or array expressed in source units.
        dimension: Physical dimension of *value*.
        factor: Conversion factor for the (source, target) pair.

    Returns:
        ``value * factor[dimension]``.
    """
    with np.errstate(all="ignore"):
        result = np.multiply(value, factor.factor(dimension))
    return _as_output(result)


def invert(value: Value, dimension: Dimension, factor: ConversionFactor) -> Value:
    """Convert *value* from the target system back into the source system.

    Returns:
        ``value / factor[dimension]``.
    """
    with np.errstate(all="ignore"):
        result = np.divide(value, factor.factor(dimension))
    return _as_output(result)


# Alias
convert = apply
