"""Nullable wrappers: a primitive plus an explicit validity flag.

These mirror the ``Null*`` types a data-access layer hands back for nullable
columns. When ``valid`` is false the wrapper is *absent*, whatever the
primitive happens to hold (it may carry stale or default data)::

    name = NullString(string="Hello", valid=False)
    name.value()  # None

Every wrapper implements the :class:`~nullable_validation.ports.valuer.IValuer`
capability through :meth:`NullableValue.value`.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, ClassVar

from pydantic import Field

from .value_object import ValueObject

_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1
_INT32_MIN, _INT32_MAX = -(2**31), 2**31 - 1
_INT16_MIN, _INT16_MAX = -(2**15), 2**15 - 1


class NullableValue(ValueObject):
    """Base class for nullable wrappers.

    Subclasses declare the primitive field and point ``value_field`` at it.
    """

    value_field: ClassVar[str]

    valid: bool = False

    def value(self) -> Any:
        """Return the primitive when valid, ``None`` when absent."""
        if not self.valid:
            return None
        return getattr(self, self.value_field)

    @property
    def is_null(self) -> bool:
        return not self.valid

    @classmethod
    def of(cls, primitive: Any) -> NullableValue:
        """Build a valid wrapper, or a null one when *primitive* is ``None``."""
        if primitive is None:
            return cls.null()
        return cls(**{cls.value_field: primitive, "valid": True})

    @classmethod
    def null(cls) -> NullableValue:
        return cls(valid=False)


class NullString(NullableValue):
    value_field: ClassVar[str] = "string"

    string: str = ""


class NullInt64(NullableValue):
    value_field: ClassVar[str] = "int64"

    int64: int = Field(default=0, ge=_INT64_MIN, le=_INT64_MAX)


class NullInt32(NullableValue):
    value_field: ClassVar[str] = "int32"

    int32: int = Field(default=0, ge=_INT32_MIN, le=_INT32_MAX)


class NullInt16(NullableValue):
    value_field: ClassVar[str] = "int16"

    int16: int = Field(default=0, ge=_INT16_MIN, le=_INT16_MAX)


class NullByte(NullableValue):
    value_field: ClassVar[str] = "byte"

    byte: int = Field(default=0, ge=0, le=255)


class NullFloat64(NullableValue):
    value_field: ClassVar[str] = "float64"

    float64: float = 0.0


class NullBool(NullableValue):
    value_field: ClassVar[str] = "boolean"

    boolean: bool = False


class NullTime(NullableValue):
    value_field: ClassVar[str] = "time"

    time: datetime | None = None


NULLABLE_TYPES: tuple[type[NullableValue], ...] = (
    NullString,
    NullInt64,
    NullInt32,
    NullInt16,
    NullByte,
    NullFloat64,
    NullBool,
    NullTime,
)
