"""IValuer — capability of values that may or may not be present."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IValuer(Protocol):
    """Protocol for nullable wrappers.

    ``value()`` returns the underlying primitive, or ``None`` when the
    wrapper is absent. The default extraction hook,
    :func:`~nullable_validation.validation.hooks.validate_valuer`, relies
    on this capability.
    """

    def value(self) -> Any: ...
