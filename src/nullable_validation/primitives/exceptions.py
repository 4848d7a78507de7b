"""Exception hierarchy for nullable-validation."""

from __future__ import annotations

from difflib import get_close_matches
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


class NullableValidationError(Exception):
    """Root exception for the entire nullable-validation package."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(NullableValidationError):
    """Raised when a validated instance violates one or more rules.

    Carries structured errors: ``{namespace: [messages]}`` and, when raised
    by :meth:`Validator.check`, the originating ``ValidationResult``.
    """

    def __init__(
        self,
        errors: dict[str, list[str]] | str | None = None,
        result: ValidationResult | None = None,
    ) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = dict(result.errors) if result is not None else {}
        else:
            self.errors = errors
        self.result = result
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "errors": self.errors,
        }


class InvalidValidationError(NullableValidationError):
    """Raised when ``validate()`` receives something that is not a struct.

    Only dataclass instances and pydantic models can be traversed.
    """

    def __init__(self, received: object) -> None:
        self.received_type = type(received)
        super().__init__(
            f"validate() expects a dataclass instance or pydantic model, "
            f"got {self.received_type.__name__}"
        )


class HookRegistrationError(NullableValidationError):
    """Raised when an extraction hook cannot be registered."""


class RuleDefinitionError(NullableValidationError):
    """Raised for malformed tags, bad rule parameters or rule registrations.

    These are programming errors: they propagate out of ``validate()``
    instead of being reported as field errors.
    """

    def __init__(self, message: str, tag: str | None = None) -> None:
        self.message = message
        self.tag = tag
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_DEFINITION_ERROR",
            "message": self.message,
            "tag": self.tag,
        }


class UnknownRuleError(RuleDefinitionError):
    """
    Unknown rule name used in a tag.

    Provides fuzzy-matched suggestions for likely intended rules.
    """

    def __init__(
        self, rule: str, valid_rules: list[str], tag: str | None = None
    ) -> None:
        self.rule = rule
        self.valid_rules = valid_rules
        self.suggestions = get_close_matches(rule, valid_rules, n=3, cutoff=0.6)

        message = f"Unknown validation rule: '{rule}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid rules: {', '.join(sorted(valid_rules)[:10])}..."
        super().__init__(message, tag=tag)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNKNOWN_RULE",
            "rule": self.rule,
            "tag": self.tag,
            "suggestions": self.suggestions,
            "valid_rules": sorted(self.valid_rules),
        }
