"""Utility modules for template-cycle."""

from template_cycle.utils.validation import ValidationResult, validate_cycle_config

__all__ = ["ValidationResult", "validate_cycle_config"]
