"""create_validator — a Validator wired for the built-in nullable wrappers."""

from __future__ import annotations

from ..domain.nullable import NULLABLE_TYPES
from .hooks import validate_valuer
from .validator import Validator


def create_validator() -> Validator:
    """Build a validator with struct rules enabled and every ``Null*`` type
    routed through :func:`validate_valuer`.

    Register hooks for your own wrapper types on the returned instance::

        validator = create_validator()
        validator.register_custom_type_func(validate_valuer, NullDecimal)
    """
    validator = Validator(required_struct_enabled=True)
    validator.register_custom_type_func(validate_valuer, *NULLABLE_TYPES)
    return validator
