"""Checks for cycle configs before they are bound into templates."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from template_cycle.core.config import CycleConfig


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

    def info(self, parameter: str, message: str, **kwargs: Any) -> None:
        self.add(Severity.INFO, parameter, message, **kwargs)

    def merge(self, other: ValidationResult) -> None:
        self.messages.extend(other.messages)


def validate_cycle_name(name: Any, result: ValidationResult) -> None:
    """Validate that a name can be referenced from a template."""
    if not isinstance(name, str) or not name:
        result.error(str(name), "Cycle name must be a non-empty string", value=name)
    elif any(c.isspace() for c in name) or "." in name:
        result.error(name, f"Cycle name '{name}' must not contain whitespace or dots", value=name)


def validate_cycle_config(config: CycleConfig) -> ValidationResult:
    """Run validation checks on every cycle in a config."""
    result = ValidationResult()

    if not isinstance(config.cycles, dict):
        result.error(
            "cycles",
            f"cycles must be a mapping of name to values, got {type(config.cycles).__name__}",
            value=config.cycles,
        )
        return result

    for name, values in config.cycles.items():
        validate_cycle_name(name, result)

        if not isinstance(values, list):
            result.error(str(name), f"Values must be a list, got {type(values).__name__}", value=values)
        elif not values:
            result.warning(str(name), "Cycle has no values and will always render empty")
        elif len(values) == 1:
            result.info(str(name), f"Cycle has a single value and always renders {values[0]!r}")

    return result
