"""Factor definition management and project I/O for Natural Units.

Handles saving/loading conversion factor definitions in JSON.  Only the
three base factors are authoritative; the derived factors written
alongside them are informational and are re-derived on load.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from natural_units.core.dimension import UnitSystem
from natural_units.core.factor import ConversionFactor

logger = logging.getLogger(__name__)


# --- Project metadata ---


@dataclass
class ProjectMeta:
    """Top-level metadata of a saved factor."""

    name: str = "Untitled"
    description: str = ""
    author: str = ""
    created: str = ""
    modified: str = ""

    def touch(self) -> None:
        """Update the modified timestamp."""
        now = datetime.now(timezone.utc).isoformat()
        if not self.created:
            self.created = now
        self.modified = now


@dataclass
class FactorDefinition:
    """A conversion factor together with what it converts between.

    Source and target systems are ``None`` for factors that do not belong
    to a named unit system pair.
    """

    meta: ProjectMeta = field(default_factory=ProjectMeta)

    source_system: str | None = None
    target_system: str | None = None
    preset: str | None = None

    conv_mass: float = 1.0
    conv_length: float = 1.0
    conv_time: float = 1.0

    def build(self) -> ConversionFactor:
        """Derive the full conversion factor from the stored base factors."""
        return ConversionFactor(self.conv_mass, self.conv_length, self.conv_time)

    @classmethod
    def from_factor(
        cls,
        factor: ConversionFactor,
        source: UnitSystem | str | None = None,
        target: UnitSystem | str | None = None,
        preset: str | None = None,
        name: str = "Untitled",
    ) -> FactorDefinition:
        """Capture the base factors of an existing conversion factor."""
        mass, length, time = factor.base_factors()
        return cls(
            meta=ProjectMeta(name=name),
            source_system=_system_name(source),
            target_system=_system_name(target),
            preset=preset,
            conv_mass=mass,
            conv_length=length,
            conv_time=time,
        )


def _system_name(system: UnitSystem | str | None) -> str | None:
    if system is None:
        return None
    if isinstance(system, UnitSystem):
        return system.value
    return UnitSystem.parse(system).value


# --- JSON serialization ---


def save_factor_json(definition: FactorDefinition, path: str | Path) -> None:
    """Save a factor definition to a JSON file.

    The fourteen derived factors are written under ``"factors"`` for
    reference.
    """
    path = Path(path)
    definition.meta.touch()

    data = asdict(definition)
    data["factors"] = definition.build().as_dict()

    with open(path, "w") as f:
        json.dump(data, f, indent=2)

    logger.info("Saved factor definition to %s", path)


def load_factor_json(path: str | Path) -> FactorDefinition:
    """Load a factor definition from a JSON file.

    Unit system names are validated; stored derived factors are ignored.

    Raises:
        ValueError: If a unit system name is unknown.
    """
    path = Path(path)
    with open(path) as f:
        data = json.load(f)

    data.pop("factors", None)
    meta = ProjectMeta(**data.pop("meta", {}))
    definition = FactorDefinition(meta=meta, **data)
    definition.source_system = _system_name(definition.source_system)
    definition.target_system = _system_name(definition.target_system)

    logger.info("Loaded factor definition '%s' from %s", meta.name, path)
    return definition
