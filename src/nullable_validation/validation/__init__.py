"""Validation system: Validator, tag language, rules, extraction hooks."""

from __future__ import annotations

from .factory import create_validator
from .hooks import ExtractionHook, validate_valuer
from .result import FieldError, ValidationResult
from .rules import Rule, RuleRegistry, build_default_registry
from .tags import Rules
from .validator import Validator

__all__ = [
    "ExtractionHook",
    "FieldError",
    "Rule",
    "RuleRegistry",
    "Rules",
    "ValidationResult",
    "Validator",
    "build_default_registry",
    "create_validator",
    "validate_valuer",
]
