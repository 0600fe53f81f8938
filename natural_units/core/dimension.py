"""Physical dimension and unit system tags."""

from __future__ import annotations

from enum import Enum


class UnitSystem(Enum):
    """Supported unit systems."""

    SI = "si"
    CGS = "cgs"
    GEOMETRIZED = "geometrized"  # c = G = 1
    NATURAL = "natural"  # c = hbar = 1, energies in eV

    @classmethod
    def parse(cls, name: str) -> UnitSystem:
        """Look up a unit system by value or member name, e.g. ``"si"`` or ``"GEOMETRIZED"``.

        Raises:
            ValueError: If the name matches no unit system.
        """
        key = name.strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(
            f"Unknown unit system '{name}'. Available: {[m.value for m in cls]}"
        )


class Dimension(Enum):
    """Physical quantity a scalar value represents.

    Each value is the suffix of the matching ``ConversionFactor`` field,
    e.g. ``Dimension.ENERGY_DENSITY`` selects ``conv_energy_density``.
    """

    TIME = "time"
    LENGTH = "length"
    MASS = "mass"
    VELOCITY = "velocity"
    MOMENTUM = "momentum"
    ANGULAR_VELOCITY = "angular_velocity"
    ACCELERATION = "acceleration"
    ENERGY = "energy"
    ENERGY_DENSITY = "energy_density"
    ANGULAR_MOMENTUM = "angular_momentum"
    FORCE = "force"
    POWER = "power"
    PRESSURE = "pressure"
    DENSITY = "density"

    @property
    def field_name(self) -> str:
        return f"conv_{self.value}"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").capitalize()

    @classmethod
    def parse(cls, name: str) -> Dimension:
        """Look up a dimension by name, e.g. ``"angular-velocity"`` or ``"MASS"``.

        Raises:
            ValueError: If the name matches no dimension.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown dimension '{name}'. Available: {[m.value for m in cls]}"
            ) from None
