"""Domain primitives: value objects and nullable wrappers."""

from __future__ import annotations

from .nullable import (
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
)
from .value_object import ValueObject

__all__: list[str] = [
    "NULLABLE_TYPES",
    "NullBool",
    "NullByte",
    "NullFloat64",
    "NullInt16",
    "NullInt32",
    "NullInt64",
    "NullString",
    "NullTime",
    "NullableValue",
    "ValueObject",
]
