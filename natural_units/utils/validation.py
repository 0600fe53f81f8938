"""Input checks for conversion factors.

The core accepts any base factors and lets zero, negative or non-finite
values propagate through the derivation.  These checks only report such
values so callers (e.g. the CLI) can warn about them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Severity level for validation messages."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding."""

    severity: Severity
    parameter: str
    message: str
    value: Any = None


@dataclass
class ValidationResult:
    """Aggregated validation result."""

    messages: list[ValidationMessage] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not any(m.severity == Severity.ERROR for m in self.messages)

    @property
    def has_warnings(self) -> bool:
        return any(m.severity == Severity.WARNING for m in self.messages)

    @property
    def errors(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    def add(self, severity: Severity, parameter: str, message: str, **kwargs: Any) -> None:
        self.messages.append(
            ValidationMessage(severity=severity, parameter=parameter, message=message, **kwargs)
        )

    def error(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.ERROR, parameter, message, **kwargs)

    def warning(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.WARNING, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


def validate_finite(name: str, value: float, result: ValidationResult) -> None:
    """Flag NaN and infinite values."""
    if not math.isfinite(value):
        result.error(name, f"{name} must be finite, got {value}", value=value)


def validate_nonzero(name: str, value: float, result: ValidationResult) -> None:
    """Flag zero, which makes dependent factors infinite or NaN."""
    if value == 0:
        result.error(name, f"{name} is zero; dependent factors will be inf/NaN", value=value)


def validate_positive(name: str, value: float, result: ValidationResult) -> None:
    """Flag negative scale factors, which are unphysical."""
    if value < 0:
        result.warning(name, f"{name} is negative ({value}); physical scales are positive", value=value)


def validate_base_factors(mass: float, length: float, time: float) -> ValidationResult:
    """Check three base factors without rejecting any of them."""
    result = ValidationResult()
    for name, value in (("conv_mass", mass), ("conv_length", length), ("conv_time", time)):
        validate_finite(name, value, result)
        if math.isfinite(value):
            validate_nonzero(name, value, result)
            validate_positive(name, value, result)
    return result
