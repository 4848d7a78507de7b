"""ValidationResult — structured, ordered field violations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldError:
    """A single failed rule on a single field.

    ``value`` is what the rule actually saw: the unwrapped primitive for
    nullable wrappers, ``None`` when the wrapper was absent.
    """

    namespace: str
    field: str
    tag: str
    param: str = ""
    value: Any = None

    @property
    def struct_namespace(self) -> str:
        head, _, _ = self.namespace.rpartition(".")
        return head

    def __str__(self) -> str:
        return (
            f"Key: '{self.namespace}' Error:Field validation for "
            f"'{self.field}' failed on the '{self.tag}' tag"
        )


def default_field_errors_factory() -> list[FieldError]:
    return []


@dataclass
class ValidationResult:
    """Collects field-level validation errors in traversal order.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure([FieldError(...)])
    """

    field_errors: list[FieldError] = field(default_factory=default_field_errors_factory)

    @property
    def is_valid(self) -> bool:
        return len(self.field_errors) == 0

    @property
    def errors(self) -> dict[str, list[str]]:
        """Errors grouped by namespace: ``{"User.Name": [message, ...]}``."""
        grouped: dict[str, list[str]] = {}
        for error in self.field_errors:
            grouped.setdefault(error.namespace, []).append(str(error))
        return grouped

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, field_errors: list[FieldError]) -> ValidationResult:
        return cls(field_errors=list(field_errors))

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Return a new result holding this result's errors, then *other*'s."""
        return ValidationResult(field_errors=self.field_errors + other.field_errors)

    def add_error(self, error: FieldError) -> None:
        self.field_errors.append(error)

    def raise_for_errors(self) -> None:
        """Raise :class:`ValidationError` if any rule failed."""
        if self.is_valid:
            return
        from ..primitives.exceptions import ValidationError

        raise ValidationError(result=self)

    def __bool__(self) -> bool:
        return self.is_valid

    def __str__(self) -> str:
        return "\n".join(str(error) for error in self.field_errors)
