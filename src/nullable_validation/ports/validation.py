"""IValidator — struct-validation protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable

    from ..validation.result import ValidationResult


@runtime_checkable
class IValidator(Protocol):
    """Protocol for struct validators."""

    def validate(self, instance: Any) -> ValidationResult:
        """Validate *instance* and return a
        :class:`~nullable_validation.validation.result.ValidationResult`.

        Must collect every failing field rather than stop at the first one.
        """
        ...

    def register_custom_type_func(
        self, hook: Callable[[Any], Any], *types: type[Any]
    ) -> None:
        """Route values of *types* through *hook* before rules are applied."""
        ...
