from .exceptions import (
    HookRegistrationError,
    InvalidValidationError,
    NullableValidationError,
    RuleDefinitionError,
    UnknownRuleError,
    ValidationError,
)

__all__ = [
    "HookRegistrationError",
    "InvalidValidationError",
    "NullableValidationError",
    "RuleDefinitionError",
    "UnknownRuleError",
    "ValidationError",
]
