"""nullable-validation — tag-driven struct validation that understands
nullable wrappers (``NullString``, ``NullInt64``, ...).

Only dependency: pydantic.
"""

from __future__ import annotations

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    NULLABLE_TYPES,
    NullableValue,
    NullBool,
    NullByte,
    NullFloat64,
    NullInt16,
    NullInt32,
    NullInt64,
    NullString,
    NullTime,
    ValueObject,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IValidator, IValuer

# ── Primitives ───────────────────────────────────────────────────
from .primitives import (
    HookRegistrationError,
    InvalidValidationError,
    NullableValidationError,
    RuleDefinitionError,
    UnknownRuleError,
    ValidationError,
)

# ── Validation ───────────────────────────────────────────────────
from .validation import (
    ExtractionHook,
    FieldError,
    Rule,
    RuleRegistry,
    Rules,
    ValidationResult,
    Validator,
    build_default_registry,
    create_validator,
    validate_valuer,
)

__all__ = [
    "NULLABLE_TYPES",
    "ExtractionHook",
    "FieldError",
    "HookRegistrationError",
    "IValidator",
    "IValuer",
    "InvalidValidationError",
    "NullBool",
    "NullByte",
    "NullFloat64",
    "NullInt16",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
    "NullableValidationError",
    "NullableValue",
    "Rule",
    "RuleDefinitionError",
    "RuleRegistry",
    "Rules",
    "UnknownRuleError",
    "ValidationError",
    "ValidationResult",
    "Validator",
    "ValueObject",
    "build_default_registry",
    "create_validator",
    "validate_valuer",
]
