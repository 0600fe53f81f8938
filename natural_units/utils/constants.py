"""Fundamental physical constants used throughout Natural Units.

All values in CGS units unless otherwise noted.

Reference: NIST CODATA 2018, http://physics.nist.gov/constants
"""

from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class PhysicalConstants:
    """One self-consistent table of fundamental constants."""

    c: float  # speed of light
    G: float  # gravitational constant
    e: float  # elementary charge
    k_b: float  # Boltzmann constant
    N_A: float  # Avogadro constant
    h: float  # Planck constant
    hbar: float  # reduced Planck constant
    m_u: float  # atomic mass unit
    m_e: float  # electron mass
    eV: float  # electronvolt
    m_solar: float  # solar mass
    r_solar: float  # solar radius

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


CONSTANT_CGS = PhysicalConstants(
    c=2.99792458e10,  # cm/s
    G=6.67430e-8,  # cm³/(g·s²)
    e=1.602176634e-19,  # C
    k_b=1.380649e-16,  # erg/K
    N_A=6.02214076e23,  # 1/mol
    h=6.62607015e-27,  # erg·s
    hbar=1.05457182e-27,  # erg·s
    m_u=1.66053906660e-24,  # g
    m_e=9.1093837015e-28,  # g
    eV=1.602176634e-12,  # erg
    m_solar=1.98848e33,  # g
    r_solar=6.957e10,  # cm
)

# pint unit strings of the CGS values above
CGS_UNITS: dict[str, str] = {
    "c": "cm/s",
    "G": "cm**3/(g*s**2)",
    "e": "C",
    "k_b": "erg/K",
    "N_A": "1/mol",
    "h": "erg*s",
    "hbar": "erg*s",
    "m_u": "g",
    "m_e": "g",
    "eV": "erg",
    "m_solar": "g",
    "r_solar": "cm",
}

# Human-readable descriptions, used by the CLI listing
DESCRIPTIONS: dict[str, str] = {
    "c": "Speed of light",
    "G": "Gravitational constant",
    "e": "Elementary charge",
    "k_b": "Boltzmann constant",
    "N_A": "Avogadro constant",
    "h": "Planck constant",
    "hbar": "Reduced Planck constant",
    "m_u": "Atomic mass unit",
    "m_e": "Electron mass",
    "eV": "Electronvolt",
    "m_solar": "Solar mass",
    "r_solar": "Solar radius",
}
